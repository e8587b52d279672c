"""Versioned process-wide singleton registry for shared API instances."""

from .version import VERSION
from .semver import is_compatible, make_compatibility_check
from .shared import SharedGlobals, process_globals
from .diag import DiagLogger, LoggingDiagLogger, NoopDiagLogger
from .registry.global_registry import (
    Capability,
    GlobalRegistry,
    RegistrationError,
    DuplicateRegistration,
    VersionMismatch,
    register_global,
    get_global,
    unregister_global,
)
from .registry.once import Once
from .slot import GlobalSlot

__all__ = [
    "VERSION",
    # Compatibility
    "is_compatible",
    "make_compatibility_check",
    # Shared namespace
    "SharedGlobals",
    "process_globals",
    # Diagnostics
    "DiagLogger",
    "LoggingDiagLogger",
    "NoopDiagLogger",
    # Registry
    "Capability",
    "GlobalRegistry",
    "RegistrationError",
    "DuplicateRegistration",
    "VersionMismatch",
    "Once",
    "register_global",
    "get_global",
    "unregister_global",
    # Accessor
    "GlobalSlot",
]
