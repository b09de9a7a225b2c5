"""
Component registry for the scoreboard

Every page region (schedule, team directory, scores, conference) registers
its init function and service here. The app initializes all registered
components in one pass and the health route reports what is mounted.
"""


class ComponentRegistry:
    """Registry for scoreboard components"""

    def __init__(self):
        self.components = {}

    def register_component(self, name, init_func, service=None):
        """Register a component's init function and its service instance"""
        self.components[name] = {'init': init_func, 'service': service}

    def get_service(self, name):
        component = self.components.get(name) or {}
        return component.get('service')

    def get_all_components(self):
        return self.components

    def init_app(self, app):
        """Run every component's init function against the app"""
        blueprints = {}
        for name, component in self.components.items():
            blueprints[name] = component['init'](app)
        return blueprints


# Global registry instance
registry = ComponentRegistry()


def register_component(name, service=None):
    """Decorator for a component's init function"""
    def decorator(init_func):
        registry.register_component(name, init_func, service)
        return init_func
    return decorator


__all__ = ['ComponentRegistry', 'registry', 'register_component']
