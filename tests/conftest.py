import struct

import pytest

from mo_core.protocol import HEADER_LEN, MAGIC_LITTLE_ENDIAN, POINTER_LEN


def pack_mo(pairs, *, order="<", major=0, minor=0, revision=None, encoding="utf-8"):
    """Lay out ``pairs`` as a machine object, in table order, duplicates kept.

    ``revision`` overrides the 4 raw revision bytes when given.
    """
    n = len(pairs)
    originals_offset = HEADER_LEN
    translations_offset = originals_offset + n * POINTER_LEN
    pool_offset = translations_offset + n * POINTER_LEN

    ids, strs, pool = [], [], b""
    for msgid, _ in pairs:
        raw = msgid.encode(encoding)
        ids.append((len(raw), pool_offset + len(pool)))
        pool += raw + b"\x00"
    for _, msgstr in pairs:
        raw = msgstr.encode(encoding)
        strs.append((len(raw), pool_offset + len(pool)))
        pool += raw + b"\x00"

    if revision is None:
        revision = struct.pack(order + "HH", major, minor)

    out = struct.pack(order + "I", MAGIC_LITTLE_ENDIAN) + revision
    out += struct.pack(order + "III", n, originals_offset, translations_offset)
    for length, offset in ids + strs:
        out += struct.pack(order + "II", length, offset)
    return out + pool


@pytest.fixture
def build_mo():
    return pack_mo
