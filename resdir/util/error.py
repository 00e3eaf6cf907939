"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class DependencyInjectionError(UtilError):
    """No provider implementation exists for a component in the requested mode."""

    def __init__(self, component: str, use_mock: bool):
        self.component = component
        self.use_mock = use_mock
        kind = "mock" if use_mock else "production"
        super().__init__(f"No {kind} implementation for {component}")
