from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Sequence, Union

from . import samsung, sony
from .base import BIOSModel, Decoder, FindResult

logger = logging.getLogger(__name__)


SONY = Decoder(
    model=BIOSModel.SONY,
    name="Sony",
    description="Older Sony VAIO models, 7 digit code",
    examples=("1234567",),
    check=sony.check,
    solve=sony.solve,
)

SAMSUNG = Decoder(
    model=BIOSModel.SAMSUNG,
    name="Samsung",
    description="Samsung laptops, 12, 14 or 16 hex digit code",
    examples=("07088120410C0000",),
    check=samsung.check,
    solve=samsung.solve,
)


def validate_registry(decoders: Sequence[Decoder]) -> None:
    """Raise ValueError if the registry is empty or has duplicate models."""
    if not decoders:
        raise ValueError("decoder registry is empty")
    seen = set()
    for dec in decoders:
        if not isinstance(dec, Decoder):
            raise ValueError(f"not a Decoder: {dec!r}")
        if dec.model in seen:
            raise ValueError(f"duplicate decoder model: {dec.model.name}")
        seen.add(dec.model)


# registration order is the output order of run_decoders
DECODERS: tuple = (SONY, SAMSUNG)
validate_registry(DECODERS)


def run_decoder(serial: str, decoder: Decoder) -> List[str]:
    if not decoder.check(serial):
        return []
    return list(decoder.solve(serial))


def run_decoders(serial: str, decoders: Iterable[Decoder]) -> List[FindResult]:
    results: List[FindResult] = []
    for dec in decoders:
        candidates = run_decoder(serial, dec)
        if candidates:
            logger.debug("%s: %d candidate(s)", dec.name, len(candidates))
            results.append((candidates, dec))
    return results


def find_password(serial: str) -> List[FindResult]:
    """Run every registered decoder against `serial`."""
    return run_decoders(serial, DECODERS)


def get_decoder(name: Union[str, int]) -> Decoder:
    """Look up a registered decoder by name (case-insensitive) or model id."""
    for dec in DECODERS:
        if isinstance(name, int):
            if dec.model == name:
                return dec
        elif dec.name.lower() == name.strip().lower():
            return dec
    raise KeyError(f"unknown decoder: {name}")


def result_to_dict(result: FindResult) -> Dict[str, Any]:
    candidates, dec = result
    return {
        "model": dec.model.name.lower(),
        "name": dec.name,
        "candidates": list(candidates),
    }
