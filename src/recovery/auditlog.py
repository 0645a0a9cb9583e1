"""recovery.auditlog

Append-only NDJSON record of password lookups, hash-chained so that
edits to earlier entries are detectable. Each line holds:
  - seq: sequence number
  - ts: ISO timestamp (UTC)
  - event: event type string, e.g. "password.lookup"
  - payload: JSON-serializable object
  - prev: digest of the previous record (null for the first)
  - digest: sha256 of the canonical JSON of the fields above
"""

from __future__ import annotations

import datetime
import hashlib
import json
import os
from datetime import timezone
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple

from decoders import FindResult, result_to_dict

_CHAINED_FIELDS = ("seq", "ts", "event", "payload", "prev")


def _digest(rec: Dict[str, Any]) -> str:
    base = {k: rec.get(k) for k in _CHAINED_FIELDS}
    b = json.dumps(
        base, sort_keys=True, separators=(",", ":"), ensure_ascii=False
    ).encode("utf-8")
    return hashlib.sha256(b).hexdigest()


def _atomic_append(path: Path, text: str) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(text)
        f.flush()
        try:
            os.fsync(f.fileno())
        except OSError:
            pass


class AuditLog:
    def __init__(self, path: str):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self.path.write_text("", encoding="utf-8")

    def _last_record(self) -> Optional[Dict[str, Any]]:
        last = None
        with self.path.open("r", encoding="utf-8") as f:
            for line in f:
                if line.strip():
                    last = line
        if not last:
            return None
        try:
            return json.loads(last)
        except ValueError as e:
            raise ValueError(f"corrupt last record in {self.path}: {e}") from e

    def append(self, event: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        last = self._last_record()
        rec = {
            "seq": (last.get("seq", 0) if last else 0) + 1,
            "ts": datetime.datetime.now(timezone.utc).isoformat(),
            "event": event,
            "payload": payload,
            "prev": last.get("digest") if last else None,
        }
        rec["digest"] = _digest(rec)
        _atomic_append(self.path, json.dumps(rec, sort_keys=True, ensure_ascii=False) + "\n")
        return rec

    def append_lookup(self, serial: str, results: Iterable[FindResult]) -> Dict[str, Any]:
        """Record one find_password call."""
        return self.append(
            "password.lookup",
            {"serial": serial, "results": [result_to_dict(r) for r in results]},
        )

    def verify(self) -> bool:
        """Return True if the chain is intact."""
        ok, _ = self.verify_with_diagnostics()
        return ok

    def verify_with_diagnostics(self) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Verify the chain and return (ok, None) or (False, diagnostic dict).

        The diagnostic dict has 'line', 'seq', 'reason' and 'record'.
        """
        last_digest = None
        with self.path.open("r", encoding="utf-8") as f:
            for idx, raw in enumerate(f, start=1):
                if not raw.strip():
                    continue
                try:
                    rec = json.loads(raw)
                except ValueError:
                    return False, {"line": idx, "seq": None, "reason": "bad_json", "record": raw}
                if rec.get("prev") != last_digest:
                    return False, {"line": idx, "seq": rec.get("seq"), "reason": "prev_mismatch", "record": rec}
                if _digest(rec) != rec.get("digest"):
                    return False, {"line": idx, "seq": rec.get("seq"), "reason": "digest_mismatch", "record": rec}
                last_digest = rec.get("digest")
        return True, None
