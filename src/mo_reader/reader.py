from __future__ import annotations

import codecs
import io
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, NamedTuple
from warnings import warn

from mo_core.protocol import (
    BYTE_ORDERS,
    DEFAULT_ENCODING,
    HALF_LEN,
    MAGIC_FMT,
    MAX_MAJOR_VERSION,
    POINTER_LEN,
    REVISION_LAYOUTS,
    REVISION_SPLIT,
    WORD_LEN,
)

from .catalog import Catalog, Version
from .const import ERRORS
from .errors import (
    MachineObjectReadError,
    MalformedEntryError,
    PositionChangedError,
    UnrecognizedSignatureError,
    UnsupportedVersionError,
    error_code,
)


class Header(NamedTuple):
    version: Version
    count: int
    originals_offset: int
    translations_offset: int


@dataclass(frozen=True)
class DecodeResult:
    status: str
    catalog: Catalog | None = None
    error_code: str | None = None
    cause: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.status == "PASS"

    @property
    def message(self) -> str | None:
        return ERRORS.get(self.error_code) if self.error_code else None


class MachineObjectReader:
    """Strict reader for GNU gettext machine object (.mo) streams.

    - Byte order comes from the magic word; everything after it follows.
    - Every sequential read happens where the reader left the stream, or
      the decode fails. Seeks are trusted and reset the tracked position.
    - Either a complete catalog comes back or ``MachineObjectReadError``.

    The reader owns the stream and closes it on ``close()`` or when used as
    a context manager. One reader per stream; not safe for concurrent use.
    """

    def __init__(
        self,
        stream: BinaryIO,
        encoding: str = DEFAULT_ENCODING,
        *,
        revision_layout: str = REVISION_SPLIT,
    ):
        if not stream.seekable():
            raise ValueError("Machine object stream must be seekable")
        if revision_layout not in REVISION_LAYOUTS:
            raise ValueError(f"Unknown revision layout {revision_layout!r}")
        codecs.lookup(encoding)

        self._stream = stream
        self._encoding = encoding
        self._revision_layout = revision_layout
        self._order = "="
        self._position = 0
        self._size = 0

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def stream(self) -> BinaryIO:
        return self._stream

    @property
    def revision_layout(self) -> str:
        return self._revision_layout

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> MachineObjectReader:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -- cursor discipline --------------------------------------------------

    def _seek(self, position: int) -> None:
        if position > self._size:
            raise MalformedEntryError(
                f"FATAL: Offset {position} is past end of stream ({self._size} bytes)"
            )
        self._stream.seek(position)
        self._position = position

    def _read(self, count: int) -> bytes:
        actual = self._stream.tell()
        if actual != self._position:
            raise PositionChangedError(
                f"FATAL: Stream moved to {actual}, reader expected {self._position}"
            )

        data = self._stream.read(count)
        if len(data) != count:
            raise MalformedEntryError(
                f"FATAL: Wanted {count} bytes at offset {self._position}, got {len(data)}"
            )

        self._position += count
        return data

    def _read_half(self) -> int:
        return struct.unpack(self._order + "H", self._read(HALF_LEN))[0]

    def _read_word(self) -> int:
        return struct.unpack(self._order + "I", self._read(WORD_LEN))[0]

    # -- header ---------------------------------------------------------------

    def _read_header(self) -> Header:
        self._order = "="
        magic = struct.unpack(MAGIC_FMT, self._read(WORD_LEN))[0]
        if magic not in BYTE_ORDERS:
            raise UnrecognizedSignatureError(f"FATAL: Unrecognized magic 0x{magic:08x}")
        self._order = BYTE_ORDERS[magic]

        if self._revision_layout == REVISION_SPLIT:
            major = self._read_half()
            minor = self._read_half()
        else:
            revision = self._read_word()
            major, minor = revision >> 16, revision & 0xFFFF

        if major > MAX_MAJOR_VERSION:
            raise UnsupportedVersionError(
                f"FATAL: Revision {major}.{minor} not supported (major <= {MAX_MAJOR_VERSION})"
            )

        count = self._read_word()
        originals_offset = self._read_word()
        translations_offset = self._read_word()
        return Header(Version(major, minor), count, originals_offset, translations_offset)

    # -- tables ---------------------------------------------------------------

    def _read_pointer(self, table_offset: int, index: int) -> tuple[int, int]:
        self._seek(table_offset + index * POINTER_LEN)
        length = self._read_word()
        offset = self._read_word()
        return length, offset

    def _read_string(self, pointer: tuple[int, int]) -> str:
        length, offset = pointer
        self._seek(offset)
        return self._read(length).decode(self._encoding)

    def _read_messages(self, header: Header) -> dict[str, str]:
        messages: dict[str, str] = {}
        for i in range(header.count):
            original = self._read_pointer(header.originals_offset, i)
            translation = self._read_pointer(header.translations_offset, i)

            msgid = self._read_string(original)
            msgstr = self._read_string(translation)

            if msgid in messages:
                warn(f"Duplicate message id {msgid!r} at index {i}; later entry wins")
            messages[msgid] = msgstr
        return messages

    # -- public ---------------------------------------------------------------

    def decode(self) -> Catalog:
        """Parse the whole stream from offset 0 into a ``Catalog``."""
        try:
            self._size = self._stream.seek(0, io.SEEK_END)
            self._seek(0)
            header = self._read_header()
            messages = self._read_messages(header)
            return Catalog(self._encoding, header.version, messages)
        except Exception as e:
            raise MachineObjectReadError() from e

    def try_decode(self) -> DecodeResult:
        """Like ``decode()`` but reports failure as a value instead of raising."""
        try:
            catalog = self.decode()
        except MachineObjectReadError as e:
            cause = e.__cause__
            return DecodeResult("FAIL", error_code=error_code(cause), cause=cause)
        return DecodeResult("PASS", catalog=catalog)


def read_catalog(path: Path, encoding: str = DEFAULT_ENCODING, **options) -> Catalog:
    """Open ``path`` and decode it, closing the file on every exit path."""
    with open(path, "rb") as f:
        return MachineObjectReader(f, encoding, **options).decode()
