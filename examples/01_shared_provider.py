"""
Shared provider example

Two GlobalRegistry objects over one namespace stand in for two copies of
the library loaded into the same interpreter (say, vendored by two
different packages).

Run:
  uv run python examples/01_shared_provider.py
"""

from __future__ import annotations

import logging

from globalapi import Capability, GlobalRegistry, GlobalSlot, SharedGlobals


class NoopTracerProvider:
    def __repr__(self) -> str:
        return "NoopTracerProvider()"


class TracerProvider:
    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"TracerProvider({self.name!r})"


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(message)s")

    shared = SharedGlobals()
    copy_a = GlobalRegistry(version="1.4.0", shared=shared)
    copy_b = GlobalRegistry(version="1.4.0", shared=shared)
    next_major = GlobalRegistry(version="2.0.0", shared=shared)
    newer_copy = GlobalRegistry(version="1.6.0", shared=shared)

    tracing_a = GlobalSlot(Capability.TRACE, NoopTracerProvider(), registry=copy_a)
    tracing_b = GlobalSlot(Capability.TRACE, NoopTracerProvider(), registry=copy_b)

    tracing_a.set_global(TracerProvider("app"))
    print("copy b sees:", tracing_b.get())

    # Second non-override registration is refused
    print("copy b register:", tracing_b.set_global(TracerProvider("other")))

    # A different major never shares the table
    print("2.x sees:", next_major.get(Capability.TRACE))

    # 1.6.0 expects at least 1.6; a 1.4.0-stamped table is not compatible
    print("1.6.0 sees:", newer_copy.get(Capability.TRACE))

    tracing_a.disable()
    print("after disable:", tracing_b.get())


if __name__ == "__main__":
    main()
