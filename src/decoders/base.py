from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple


class BIOSModel(enum.IntEnum):
    """Vendor families known to the tool.

    Only some of these have a decoder registered; the rest are kept so
    model ids stay stable when new decoders are added.
    """

    SONY = 1
    SAMSUNG = 2
    PHOENIX = 3
    HP_COMPAQ = 4
    FSI_PHOENIX = 5
    FSIL_PHOENIX = 6
    FSIP_PHOENIX = 7
    FSIS_PHOENIX = 8
    FSIX_PHOENIX = 9
    INSYDE = 10
    HP_MINI = 11


@dataclass(frozen=True)
class Decoder:
    """Recognizer + solver pair for one vendor family.

    `check` decides whether a serial has this vendor's shape; `solve`
    returns the candidate passwords (possibly empty) and must only be
    called on serials that passed `check`.
    """

    model: BIOSModel
    name: str
    check: Callable[[str], bool]
    solve: Callable[[str], List[str]]
    description: Optional[str] = None
    examples: Tuple[str, ...] = field(default_factory=tuple)


FindResult = Tuple[List[str], Decoder]
