"""Command line front-end for BIOS password recovery.

Usage (from repo root):
    python -m recovery.cli 1234567 07088120410C0000
    echo 07088120410C0000 | python -m recovery.cli --json

Prints the candidate passwords found for each serial, grouped by decoder.
Exit status is 0 if any serial produced a candidate, 1 otherwise.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from decoders import DECODERS, find_password, get_decoder, result_to_dict, run_decoders
from recovery.auditlog import AuditLog
from settings import get_auditlog_path, get_log_level

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bios-pw",
        description="Recover BIOS power-on password candidates from a laptop serial",
    )
    p.add_argument(
        "serial",
        nargs="*",
        help="Serial / service code shown by the BIOS (read from stdin if omitted)",
    )
    p.add_argument(
        "--decoder",
        action="append",
        default=None,
        help="Only run the named decoder (repeatable)",
    )
    p.add_argument("--json", action="store_true", help="Emit one JSON object per serial")
    p.add_argument("--list", action="store_true", help="List known decoders and exit")
    p.add_argument(
        "--auditlog",
        default=None,
        help="Append each lookup to this hash-chained NDJSON log",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def _print_decoders() -> None:
    for dec in DECODERS:
        print(f"{dec.name}: {dec.description or ''}")
        if dec.examples:
            print(f"  examples: {', '.join(dec.examples)}")


def main(argv: Optional[List[str]] = None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        _print_decoders()
        return 0

    decoders = DECODERS
    if args.decoder:
        try:
            wanted = {get_decoder(name).model for name in args.decoder}
        except KeyError as e:
            p.error(str(e.args[0]))
        # keep registration order whatever order the names were given in
        decoders = tuple(dec for dec in DECODERS if dec.model in wanted)

    serials = args.serial or [line.strip() for line in sys.stdin if line.strip()]

    al = None
    log_path = args.auditlog or get_auditlog_path()
    if log_path:
        try:
            al = AuditLog(str(log_path))
        except OSError as e:
            logger.error("cannot open lookup log %s: %s", log_path, e)

    found_any = False
    for serial in serials:
        if decoders is DECODERS:
            results = find_password(serial)
        else:
            results = run_decoders(serial, decoders)
        found_any = found_any or bool(results)

        if al is not None:
            try:
                al.append_lookup(serial, results)
            except (OSError, ValueError) as e:
                logger.error("lookup log write failed: %s", e)

        if args.json:
            print(json.dumps({"serial": serial, "results": [result_to_dict(r) for r in results]}))
            continue
        if not results:
            print(f"{serial}: no decoder matched")
            continue
        for candidates, dec in results:
            print(f"{serial}: {dec.name}: {', '.join(candidates)}")

    return 0 if found_any else 1


if __name__ == "__main__":
    sys.exit(main())
