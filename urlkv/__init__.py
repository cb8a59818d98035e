"""urlkv: Key-value storage in a URL query string."""

from .address import Address
from .codec import decode, encode
from .driver import Driver, QueryStringDriver, query_string_driver
from .env import Environment, HistoryEntry, MemoryEnvironment
from .errors import (
    AddressTooLong,
    EnvironmentUnavailable,
    InvalidAddress,
    QueryStringDriverError,
    StorageOperationFailed,
)
from .mutator import AddressMutator
from .operations import KeyOperations
from .options import DriverOptions
from .paths import extract
from .resolver import AddressResolver
from .values import ValueKind, from_wire, to_wire

__all__ = [
    "Address",
    "AddressMutator",
    "AddressResolver",
    "AddressTooLong",
    "Driver",
    "DriverOptions",
    "Environment",
    "EnvironmentUnavailable",
    "HistoryEntry",
    "InvalidAddress",
    "KeyOperations",
    "MemoryEnvironment",
    "QueryStringDriver",
    "QueryStringDriverError",
    "StorageOperationFailed",
    "ValueKind",
    "decode",
    "encode",
    "extract",
    "from_wire",
    "query_string_driver",
    "to_wire",
]
