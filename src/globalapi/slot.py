"""
Typed accessor for a single global API.

Consumers usually want "the registered instance, or a no-op one":

    tracing = GlobalSlot(Capability.TRACE, fallback=NoopTracerProvider())
    tracing.set_global(my_provider)
    provider = tracing.get()
"""

from typing import Generic
from typing_extensions import TypeVar

from .diag import DiagLogger, LoggingDiagLogger
from .registry.global_registry import Capability, GlobalRegistry, _global_registry


T = TypeVar('T', default=object)


class GlobalSlot(Generic[T]):
    """One capability of a `GlobalRegistry`, with a fallback for when it's unset."""

    def __init__(
        self,
        capability: Capability | str,
        fallback: T,
        *,
        registry: GlobalRegistry | None = None,
        diag: DiagLogger | None = None,
    ):
        self.capability = Capability(capability)
        self.fallback = fallback
        self.registry = registry if registry is not None else _global_registry
        self.diag = diag if diag is not None else LoggingDiagLogger()

    def set_global(self, instance: T, *, allow_override: bool = False) -> bool:
        """Register `instance`. Returns False if the registry refused it."""
        return self.registry.register(self.capability, instance, self.diag, allow_override)

    def get_or_none(self) -> T | None:
        return self.registry.get(self.capability)

    def get(self) -> T:
        instance = self.registry.get(self.capability)
        if instance is None:
            return self.fallback
        return instance

    def disable(self) -> None:
        """Remove the global; `get()` returns the fallback afterwards."""
        self.registry.unregister(self.capability, self.diag)
