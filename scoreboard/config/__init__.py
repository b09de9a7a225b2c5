from .settings import ScoreboardConfig, TestingConfig

__all__ = ['ScoreboardConfig', 'TestingConfig']
