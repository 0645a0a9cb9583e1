"""BIOS password decoders package.

Each decoder bundles a recognizer (does this serial look like one of
ours?) with a solver (turn the serial into candidate passwords). The
runner module holds the static registry and the dispatch helpers.
"""

from .base import BIOSModel, Decoder, FindResult
from .runner import (
    DECODERS,
    find_password,
    get_decoder,
    result_to_dict,
    run_decoder,
    run_decoders,
)

__all__ = [
    "BIOSModel",
    "Decoder",
    "FindResult",
    "DECODERS",
    "find_password",
    "get_decoder",
    "result_to_dict",
    "run_decoder",
    "run_decoders",
]
