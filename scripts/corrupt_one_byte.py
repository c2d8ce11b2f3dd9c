import sys
from pathlib import Path

def main():
    if len(sys.argv) != 2:
        print("Usage: corrupt_one_byte.py <file.mo>")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    b = bytearray(p.read_bytes())
    if len(b) < 20:
        print("File too small to be a machine object.")
        raise SystemExit(2)

    # Flip a bit in the first magic byte. Neither byte order matches afterwards.
    idx = 0
    b[idx] ^= 0x01
    p.write_bytes(bytes(b))
    print(f"Corrupted 1 byte at offset {idx} in {p}")

if __name__ == "__main__":
    main()
