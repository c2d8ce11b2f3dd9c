"""mo core - Shared on-disk constants for machine object catalogs."""
from .protocol import (
    BYTE_ORDERS,
    DEFAULT_ENCODING,
    HEADER_LEN,
    MAGIC_BIG_ENDIAN,
    MAGIC_LITTLE_ENDIAN,
    MAX_MAJOR_VERSION,
    POINTER_LEN,
    REVISION_LAYOUTS,
    REVISION_SPLIT,
    REVISION_WORD,
)

__all__ = [
    "BYTE_ORDERS",
    "DEFAULT_ENCODING",
    "HEADER_LEN",
    "MAGIC_BIG_ENDIAN",
    "MAGIC_LITTLE_ENDIAN",
    "MAX_MAJOR_VERSION",
    "POINTER_LEN",
    "REVISION_LAYOUTS",
    "REVISION_SPLIT",
    "REVISION_WORD",
]
