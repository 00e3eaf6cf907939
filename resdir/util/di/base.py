"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Swappable infrastructure: the database and the external tag classifier
Component = Literal["persistence", "classifier"]


class ProviderBase(Provider):
    """Provider carrying the metadata used to pick prod or mock implementations.

    Attributes:
        __mock_component__: Component a mockable base stands for, None on
            providers that are never swapped
        __is_mock__: Set on the implementation tests use
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
