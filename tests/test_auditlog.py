import json
import tempfile
import unittest
from pathlib import Path

from decoders import find_password
from recovery.auditlog import AuditLog


class TestAuditLog(unittest.TestCase):
    def test_append_and_verify(self):
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "lookups.ndjson"
            al = AuditLog(str(p))
            first = al.append_lookup("1234567", find_password("1234567"))
            second = al.append_lookup("not-a-serial", [])
            self.assertEqual(first["seq"], 1)
            self.assertEqual(second["prev"], first["digest"])
            self.assertEqual(
                first["payload"]["results"][0]["candidates"], ["9648669"]
            )
            self.assertTrue(al.verify())

    def test_tamper_detection(self):
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "lookups.ndjson"
            al = AuditLog(str(p))
            al.append("a", {"x": 1})
            al.append("b", {"y": 2})
            parts = p.read_text(encoding="utf-8").splitlines()
            rec = json.loads(parts[1])
            rec["payload"]["y"] = 999
            parts[1] = json.dumps(rec, sort_keys=True, ensure_ascii=False)
            p.write_text("\n".join(parts) + "\n", encoding="utf-8")
            ok, diag = al.verify_with_diagnostics()
            self.assertFalse(ok)
            self.assertEqual(diag["reason"], "digest_mismatch")
            self.assertEqual(diag["line"], 2)

    def test_corrupt_last_record_blocks_append(self):
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "lookups.ndjson"
            al = AuditLog(str(p))
            al.append("a", {"x": 1})
            with p.open("a", encoding="utf-8") as f:
                f.write("{truncated\n")
            with self.assertRaises(ValueError):
                al.append("b", {"y": 2})
            self.assertEqual(len(p.read_text(encoding="utf-8").splitlines()), 2)


if __name__ == "__main__":
    unittest.main()
