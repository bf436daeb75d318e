"""Provider base carrying the swappable-component tags."""

from typing import ClassVar, Literal

from dishka import Provider

# Components whose providers come in a production and an in-memory flavour
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every StackIt provider.

    A provider class whose ``__mock_component__`` is set is an abstract
    slot: the container picks the subclass whose ``__is_mock__`` matches
    the request.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
