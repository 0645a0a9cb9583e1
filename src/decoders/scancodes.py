"""Keyboard scan code to ASCII translation.

Only the digit row, the top letter row and part of the home/bottom rows
are mapped. Codes 39-43 and 51-53 (punctuation keys on a US layout) are
left out since no firmware sample has confirmed how they are used.
"""

from __future__ import annotations

from typing import Dict, Iterable

KEYBOARD_MAP: Dict[int, str] = {
    2: "1", 3: "2", 4: "3", 5: "4", 6: "5", 7: "6", 8: "7", 9: "8",
    10: "9", 11: "0", 16: "q", 17: "w", 18: "e", 19: "r", 20: "t", 21: "y",
    22: "u", 23: "i", 24: "o", 25: "p", 30: "a", 31: "s", 32: "d", 33: "f",
    34: "g", 35: "h", 36: "j", 37: "k", 38: "l", 44: "z", 45: "x", 46: "c",
    47: "v", 48: "b", 49: "n", 50: "m",
}  # fmt: skip


def keyboard_to_ascii(codes: Iterable[int]) -> str:
    """Translate scan codes until the first 0.

    Returns an empty string if any code before the terminator is unmapped.
    """
    out = []
    for code in codes:
        if code == 0:
            break
        ch = KEYBOARD_MAP.get(code)
        if ch is None:
            return ""
        out.append(ch)
    return "".join(out)
