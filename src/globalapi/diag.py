"""
Diagnostic sinks used by the registry.

The registry only needs `debug` and `error`. Anything with those two
methods works; `LoggingDiagLogger` routes them to the standard `logging`
module.
"""

import logging
from typing import Protocol, runtime_checkable


@runtime_checkable
class DiagLogger(Protocol):
    """Minimal diagnostic sink."""

    def debug(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LoggingDiagLogger:
    """Forward diagnostics to a `logging.Logger`."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger if logger is not None else logging.getLogger("globalapi")

    def debug(self, message: str) -> None:
        self.logger.debug(message)

    def error(self, message: str) -> None:
        self.logger.error(message)


class NoopDiagLogger:
    """Discard every diagnostic."""

    def debug(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass
