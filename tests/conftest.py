"""Shared fixtures and test doubles."""

from __future__ import annotations

import pytest

from globalapi import GlobalRegistry, Once, SharedGlobals


class RecordingDiag:
    """Diagnostic sink that records every message."""

    def __init__(self):
        self.debugs: list[str] = []
        self.errors: list[str] = []

    def debug(self, message: str) -> None:
        self.debugs.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def diag() -> RecordingDiag:
    return RecordingDiag()


@pytest.fixture
def shared() -> SharedGlobals:
    """A fresh namespace, isolated from the real process-wide one."""
    return SharedGlobals()


@pytest.fixture
def registry(shared: SharedGlobals) -> GlobalRegistry:
    return GlobalRegistry(version="1.4.0", shared=shared, instance_id=Once(lambda: 7))
