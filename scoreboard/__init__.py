"""
NFL Scoreboard - schedules, live scores and standings from the ESPN site API
"""

__version__ = '0.1.0'
