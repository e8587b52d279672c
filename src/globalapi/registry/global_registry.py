"""
Process-wide registry of API globals, shared between copies of the library.

Two tables live on the shared namespace:
  - primary: `globalapi.<major>`, read by `get()`
  - scoped:  `globalapi.<major>.instance.<id>`, written by override registrations only

Copies with the same major version share the primary table; a different
major version gets a different key and never sees it.
"""

from enum import Enum
from typing import Any, Callable

from ..diag import DiagLogger, LoggingDiagLogger
from ..semver import make_compatibility_check
from ..shared import SharedGlobals, process_globals
from ..version import VERSION
from .once import Once, process_instance_id


class Capability(str, Enum):
    """API roles that can be registered globally."""
    DIAG = "diag"
    TRACE = "trace"
    CONTEXT = "context"
    METRICS = "metrics"
    PROPAGATION = "propagation"


class RegistrationError(Exception):
    """Base for registration conflicts. Reported via diagnostics, never raised by register()."""
    pass


class DuplicateRegistration(RegistrationError):
    """A capability is already registered and override was not allowed."""

    def __init__(self, capability: Capability):
        self.capability = capability
        super().__init__(
            f"globalapi: Attempted duplicate registration of API: {capability.value}"
        )


class VersionMismatch(RegistrationError):
    """The primary table was stamped by a different exact version."""

    def __init__(self, capability: Capability, registered_version: str, version: str):
        self.capability = capability
        self.registered_version = registered_version
        self.version = version
        super().__init__(
            f"globalapi: Registration of version v{version} for {capability.value} "
            f"does not match previously registered API v{registered_version}"
        )


def global_key(version: str) -> str:
    """Key of the primary table for `version`'s major."""
    major = version.split(".")[0]
    return f"globalapi.{major}"


def scoped_key(version: str, instance_id: int) -> str:
    """Key of the scoped table for `version`'s major and an instance id."""
    return f"{global_key(version)}.instance.{instance_id}"


class GlobalRegistry:
    """
    Versioned registry over a shared namespace.

    All guard failures are reported to the diagnostic sink and turned into a
    False / None result; nothing here raises for a conflict.
    """

    def __init__(
        self,
        *,
        version: str = VERSION,
        shared: SharedGlobals | None = None,
        is_compatible: Callable[[str], bool] | None = None,
        instance_id: Once[int] | None = None,
    ):
        self.version = version
        self.shared = shared if shared is not None else process_globals()
        self.is_compatible = (
            is_compatible if is_compatible is not None else make_compatibility_check(version)
        )
        self._instance_id = instance_id if instance_id is not None else process_instance_id
        self.key = global_key(version)
        self._scoped_id: int | None = None

    @property
    def scoped_key(self) -> str | None:
        """Key of the scoped table, or None until the first override registration."""
        if self._scoped_id is None:
            return None
        return scoped_key(self.version, self._scoped_id)

    def _scoped_table(self) -> tuple[int, dict[str, Any]]:
        """
        This registry's scoped table, created on first use.

        Clock-derived ids can collide between copies; an id whose table was
        stamped by another version is skipped so the table is never inherited.
        Caller holds the shared lock.
        """
        if self._scoped_id is None:
            instance_id = self._instance_id.get()
            existing = self.shared.get(scoped_key(self.version, instance_id))
            while existing is not None and existing.get("version") != self.version:
                instance_id += 1
                existing = self.shared.get(scoped_key(self.version, instance_id))
            self._scoped_id = instance_id
        key = scoped_key(self.version, self._scoped_id)
        return self._scoped_id, self.shared.get_or_create(key, self.version)

    def register(
        self,
        capability: Capability | str,
        instance: Any,
        diag: DiagLogger | None = None,
        allow_override: bool = True,
    ) -> bool:
        """
        Install `instance` as the global for `capability`.

        With `allow_override`, the instance is also written to this copy's
        scoped table. That write always happens; the return value only
        reports the primary table.
        """
        capability = Capability(capability)
        diag = diag if diag is not None else LoggingDiagLogger()
        name = capability.value

        with self.shared.lock:
            if allow_override:
                instance_id, scoped = self._scoped_table()
                scoped[name] = instance
                diag.debug(
                    f"globalapi: Registered scoped instance {instance_id} "
                    f"for {name} v{self.version}."
                )

            api = self.shared.get_or_create(self.key, self.version)

            if not allow_override and name in api:
                diag.error(str(DuplicateRegistration(capability)))
                return False

            if api.get("version") != self.version:
                # All copies writing the primary table must be the exact same version
                diag.error(str(VersionMismatch(capability, api.get("version"), self.version)))
                return False

            api[name] = instance
            diag.debug(f"globalapi: Registered a global for {name} v{self.version}.")
            return True

    def get(self, capability: Capability | str) -> Any | None:
        """Return the global for `capability`, or None if absent or incompatible."""
        name = Capability(capability).value
        with self.shared.lock:
            api = self.shared.get(self.key)
            if api is None:
                return None
            registered_version = api.get("version")
            if not registered_version or not self.is_compatible(registered_version):
                return None
            return api.get(name)

    def unregister(self, capability: Capability | str, diag: DiagLogger | None = None) -> None:
        """Remove the global for `capability` from the primary table."""
        name = Capability(capability).value
        diag = diag if diag is not None else LoggingDiagLogger()
        diag.debug(f"globalapi: Unregistering a global for {name} v{self.version}.")
        with self.shared.lock:
            api = self.shared.get(self.key)
            if api is not None:
                api.pop(name, None)


# Global registry instance
_global_registry = GlobalRegistry()


def register_global(
    capability: Capability | str,
    instance: Any,
    diag: DiagLogger | None = None,
    allow_override: bool = True,
) -> bool:
    """Register an API global in the process-wide registry."""
    return _global_registry.register(capability, instance, diag, allow_override)


def get_global(capability: Capability | str) -> Any | None:
    """Look up an API global in the process-wide registry."""
    return _global_registry.get(capability)


def unregister_global(capability: Capability | str, diag: DiagLogger | None = None) -> None:
    """Remove an API global from the process-wide registry."""
    _global_registry.unregister(capability, diag)
