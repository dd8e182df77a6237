"""
netrcparse: read credentials from a permission-checked .netrc file.
"""

from netrcparse.lib.errors import (
    NetrcError,
    UnsafePermissionsError,
    NetrcIOError,
    NetrcParseError,
    InvalidTokenError,
    NoMachineSpecifiedError,
    NoValueForTokenError,
    UnsupportedPlatformError,
)
from netrcparse.lib.netrc import Netrc
from netrcparse.models.dataModel import MachineRecord, MachineTable, NetrcToken

__all__ = [
    "Netrc",
    "MachineRecord",
    "MachineTable",
    "NetrcToken",
    "NetrcError",
    "UnsafePermissionsError",
    "NetrcIOError",
    "NetrcParseError",
    "InvalidTokenError",
    "NoMachineSpecifiedError",
    "NoValueForTokenError",
    "UnsupportedPlatformError",
]
