import io
import json

import pytest

import settings
from recovery import cli
from recovery.auditlog import AuditLog


@pytest.fixture(autouse=True)
def _isolated(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "_get_user_data_dir", lambda: tmp_path / "BiosPw")
    monkeypatch.delenv("BIOSPW_LOG_LEVEL", raising=False)
    monkeypatch.delenv("BIOSPW_AUDITLOG", raising=False)


def test_text_output(capsys):
    rc = cli.main(["1234567", "07088120410C0000"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "1234567: Sony: 9648669" in out
    assert "07088120410C0000: Samsung: 12345" in out


def test_no_match_exit_code(capsys):
    assert cli.main(["not-a-serial"]) == 1
    assert "no decoder matched" in capsys.readouterr().out


def test_json_output(capsys):
    cli.main(["--json", "1234567"])
    line = capsys.readouterr().out.strip()
    obj = json.loads(line)
    assert obj["serial"] == "1234567"
    assert obj["results"][0]["name"] == "Sony"


def test_decoder_filter(capsys):
    assert cli.main(["--decoder", "samsung", "1234567"]) == 1
    assert cli.main(["--decoder", "Sony", "1234567"]) == 0


def test_unknown_decoder_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        cli.main(["--decoder", "acme", "1234567"])
    assert exc.value.code == 2


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1234567\n\n07088120410C0000\n"))
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert "Sony" in out and "Samsung" in out


def test_list_decoders(capsys):
    assert cli.main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "Sony" in out and "07088120410C0000" in out


def test_auditlog_records_lookups(tmp_path):
    log = tmp_path / "lookups.ndjson"
    cli.main(["--auditlog", str(log), "1234567", "nope"])
    lines = log.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert json.loads(lines[0])["event"] == "password.lookup"
    assert AuditLog(str(log)).verify()


def test_unusable_settings_dir_does_not_stop_lookup(tmp_path, monkeypatch, capsys):
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.setattr(settings, "_get_user_data_dir", lambda: blocker / "BiosPw")
    assert cli.main(["1234567"]) == 0
    assert "Sony: 9648669" in capsys.readouterr().out


def test_decoder_filter_keeps_registration_order(monkeypatch):
    seen = []

    def fake_run_decoders(serial, decoders):
        seen.append([d.name for d in decoders])
        return []

    monkeypatch.setattr(cli, "run_decoders", fake_run_decoders)
    cli.main(["--decoder", "samsung", "--decoder", "sony", "1234567"])
    assert seen == [["Sony", "Samsung"]]


def test_corrupt_auditlog_is_reported_not_extended(tmp_path, capsys):
    log = tmp_path / "lookups.ndjson"
    log.write_text("{not json\n", encoding="utf-8")
    assert cli.main(["--auditlog", str(log), "1234567"]) == 0
    assert "Sony: 9648669" in capsys.readouterr().out
    assert log.read_text(encoding="utf-8") == "{not json\n"
