from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

T = TypeVar("T")


def provide(provider: Provider[T]) -> Callable[[], T]:
    """
    Create a FastAPI dependency for a container provider.

    The provider is resolved per request, so test overrides on the
    container take effect immediately.
    """

    def dependency() -> T:
        return provider()

    return dependency
