"""Old Sony VAIO power-on passwords (7 digit serial codes)."""

from __future__ import annotations

import re
from typing import List

# position i maps digit d to _TABLE[10 * i + d]
_TABLE = "0987654321876543210976543210982109876543109876543221098765436543210987"

# unanchored: the code may be printed with surrounding text
_SERIAL_RX = re.compile(r"[0-9]{7}")


def check(serial: str) -> bool:
    return _SERIAL_RX.search(serial) is not None


def solve(serial: str) -> List[str]:
    if len(serial) != 7 or not serial.isascii() or not serial.isdigit():
        return []
    code = "".join(_TABLE[10 * i + int(ch)] for i, ch in enumerate(serial))
    return [code]
