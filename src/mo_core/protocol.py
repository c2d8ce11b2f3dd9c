"""GNU gettext machine object (.mo) protocol constants.

Single source of truth for on-disk magic values and header layout.
Keep this file stable. Reader, exporter and fixture tools must agree on it.
"""

# Magic word, always unpacked little-endian. Which one matches tells us the
# byte order the file was written in, whatever the host byte order is.
MAGIC_LITTLE_ENDIAN = 0x950412DE
MAGIC_BIG_ENDIAN = 0xDE120495
MAGIC_FMT = "<I"

BYTE_ORDERS = {
    MAGIC_LITTLE_ENDIAN: "<",
    MAGIC_BIG_ENDIAN: ">",
}

# Header: [Magic(4) | Major(2) | Minor(2) | N(4) | O(4) | T(4)] = 20 bytes
HEADER_LEN = 20
WORD_LEN = 4
HALF_LEN = 2

# Table row: [Length(4) | Offset(4)]
POINTER_LEN = 2 * WORD_LEN

MAX_MAJOR_VERSION = 1

# Revision field readings.
#   split: two 16-bit values, major first
#   word:  one 32-bit value, major in the high half
REVISION_SPLIT = "split"
REVISION_WORD = "word"
REVISION_LAYOUTS = (REVISION_SPLIT, REVISION_WORD)

DEFAULT_ENCODING = "utf-8"
