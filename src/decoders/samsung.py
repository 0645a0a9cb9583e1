"""Samsung laptop power-on passwords.

The service code shown by the BIOS is 12, 14 or 16 hex digits. The first
byte selects a row (mod 5) of a rotation table; every following byte is
the password byte rotated right by the table amount for its position.
Two rotation tables have been seen in the wild, and the password may be
stored either as keyboard scan codes or as plain ASCII, so every
combination is tried and the survivors are returned in a fixed order:

1. scan codes through table 1 (table 2 if table 1 gives nothing)
2. ASCII through table 1
3. ASCII through table 2
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from .scancodes import keyboard_to_ascii

logger = logging.getLogger(__name__)

# 5 rows (key) x 7 columns (byte position)
ROTATION_TABLE_1 = (
    7, 1, 5, 3, 0, 6, 2,
    5, 2, 3, 0, 6, 1, 7,
    6, 1, 5, 2, 7, 1, 0,
    3, 7, 6, 1, 0, 5, 2,
    1, 5, 7, 3, 2, 0, 6,
)  # fmt: skip
ROTATION_TABLE_2 = (
    1, 6, 2, 5, 7, 3, 0,
    7, 1, 6, 2, 5, 0, 3,
    0, 6, 5, 1, 1, 7, 2,
    5, 2, 3, 7, 6, 2, 1,
    3, 7, 6, 5, 0, 1, 7,
)  # fmt: skip

SERIAL_LENGTHS = (12, 14, 16)

_HEX_RX = re.compile(r"[0-9A-Fa-f]+")


def check(serial: str) -> bool:
    return len(serial) in SERIAL_LENGTHS and _HEX_RX.fullmatch(serial) is not None


def parse_hash(serial: str) -> List[int]:
    """Return the bytes following the key byte."""
    return [
        int(serial[2 * i : 2 * i + 2], 16) for i in range(1, len(serial) // 2)
    ]


def derive_key(serial: str) -> int:
    return int(serial[:2], 16) % 5


def rotl8(value: int, amount: int) -> int:
    return ((value << amount) & 0xFF) | (value >> (8 - amount))


def decrypt_hash(hash_: Sequence[int], key: int, table: Sequence[int]) -> List[int]:
    return [rotl8(b, table[7 * key + i]) for i, b in enumerate(hash_)]


def bytes_to_ascii(data: Sequence[int]) -> Optional[str]:
    """Printable ASCII up to the first NUL, or None if a byte is out of range."""
    out = []
    for b in data:
        if b == 0:
            break
        if b < 32 or b > 127:
            return None
        out.append(chr(b))
    return "".join(out)


def solve(serial: str) -> List[str]:
    hash_ = parse_hash(serial)
    key = derive_key(serial)
    plain1 = decrypt_hash(hash_, key, ROTATION_TABLE_1)
    plain2 = decrypt_hash(hash_, key, ROTATION_TABLE_2)

    scan_pwd = keyboard_to_ascii(plain1)
    if not scan_pwd:
        scan_pwd = keyboard_to_ascii(plain2)

    found = [scan_pwd, bytes_to_ascii(plain1), bytes_to_ascii(plain2)]
    candidates = [c for c in found if c]
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "samsung key=%d bytes=%d candidates=%d", key, len(hash_), len(candidates)
        )
    return candidates
