"""mo reader - Decode GNU gettext machine object catalogs."""
from .catalog import Catalog, Version
from .errors import (
    MachineObjectFormatError,
    MachineObjectReadError,
    MalformedEntryError,
    PositionChangedError,
    UnrecognizedSignatureError,
    UnsupportedVersionError,
)
from .reader import DecodeResult, MachineObjectReader, read_catalog

__all__ = [
    "Catalog",
    "Version",
    "DecodeResult",
    "MachineObjectReader",
    "read_catalog",
    "MachineObjectFormatError",
    "MachineObjectReadError",
    "MalformedEntryError",
    "PositionChangedError",
    "UnrecognizedSignatureError",
    "UnsupportedVersionError",
]
