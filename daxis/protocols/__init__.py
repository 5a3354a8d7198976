"""Protocol definitions for daxis axes and environment sources.

These protocols use Python's typing.Protocol system with the
@runtime_checkable decorator to enable both static type checking and runtime
isinstance() checks.
"""

from .axis_protocol import AxisProtocol, BuildEnvironment, EnvironmentProviderProtocol


__all__ = [
    "AxisProtocol",
    "BuildEnvironment",
    "EnvironmentProviderProtocol",
]
