"""Write the pt-PT sample catalog used by the end-to-end tests.

Layout follows what msgfmt produces: 28-byte header (no hash table), both
pointer tables sorted by msgid, then NUL-terminated strings.
"""
import struct
import sys
from pathlib import Path

from mo_core.protocol import MAGIC_LITTLE_ENDIAN, POINTER_LEN

# --- CONFIGURATION ---
ENCODING = "latin-1"
HEADER_ENTRY = (
    "Project-Id-Version: sample\n"
    "Language: pt_PT\n"
    "MIME-Version: 1.0\n"
    "Content-Type: text/plain; charset=ISO-8859-1\n"
    "Content-Transfer-Encoding: 8bit\n"
)
MESSAGES = {
    "": HEADER_ENTRY,
    "Hello World": "Olá Mundo",
    "Goodbye World": "Adeus Mundo",
}
FULL_HEADER_LEN = 28


def build_catalog(messages: dict, encoding: str = ENCODING) -> bytes:
    ids = sorted(messages)
    n = len(ids)
    originals_offset = FULL_HEADER_LEN
    translations_offset = originals_offset + n * POINTER_LEN
    cursor = translations_offset + n * POINTER_LEN

    id_table, str_table, pool = [], [], b""
    for key in ids:
        raw = key.encode(encoding)
        id_table.append((len(raw), cursor + len(pool)))
        pool += raw + b"\x00"
    for key in ids:
        raw = messages[key].encode(encoding)
        str_table.append((len(raw), cursor + len(pool)))
        pool += raw + b"\x00"

    # magic, revision, N, O, T, hash size, hash offset
    out = struct.pack("<IIIIIII", MAGIC_LITTLE_ENDIAN, 0, n, originals_offset, translations_offset, 0, cursor)
    for length, offset in id_table + str_table:
        out += struct.pack("<II", length, offset)
    return out + pool


def main():
    if len(sys.argv) != 2:
        print("Usage: make_catalog.py <out_dir>")
        raise SystemExit(2)

    out = Path(sys.argv[1]) / "pt-PT" / "default.mo"
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(build_catalog(MESSAGES))
    print(f"Wrote {len(MESSAGES)} messages to {out}")


if __name__ == "__main__":
    main()
