from __future__ import annotations

import pytest
from typer.testing import CliRunner

from gedcom_document import DiagnosticKind, GedcomStructureError, parse
from gedcom_document.cli import app
from gedcom_document.config import CONFIG_ENV_VAR, get_config, reset_config
from gedcom_document.logging import get_logger, list_active_loggers

runner = CliRunner()


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_project_config_is_loaded() -> None:
    cfg = get_config()
    assert cfg.strict is False
    assert cfg.encoding == "utf-8-sig"
    assert cfg.logging.get("file") == "gedcom_document.log"
    assert get_config() is cfg


def test_env_override(tmp_path, monkeypatch) -> None:
    path = tmp_path / "custom.yml"
    path.write_text("debug: true\nparser:\n  strict: true\n  encoding: latin-1\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    cfg = get_config()
    assert cfg.debug is True
    assert cfg.strict is True
    assert cfg.encoding == "latin-1"


def test_missing_file_gives_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "absent.yml"))

    cfg = get_config()
    assert cfg.debug is False
    assert cfg.strict is False
    assert cfg.paths == {}


def test_get_logger_prefixes_project_name() -> None:
    log = get_logger("some_module")
    assert log.name == "gedcom_document.some_module"
    assert "gedcom_document.some_module" in list_active_loggers()


def _strict_config(tmp_path, monkeypatch) -> None:
    path = tmp_path / "strict.yml"
    path.write_text("parser:\n  strict: true\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))


def test_configured_strict_flag_reaches_parse(tmp_path, monkeypatch) -> None:
    _strict_config(tmp_path, monkeypatch)

    with pytest.raises(GedcomStructureError):
        parse("0 HEAD\n0 @Z1@ ZZZZ\n0 TRLR")

    document = parse("0 HEAD\n0 @Z1@ ZZZZ\n0 TRLR", strict=False)
    assert [d.kind for d in document.diagnostics] == [DiagnosticKind.UNKNOWN_RECORD]


def test_cli_follows_config_unless_lenient(tmp_path, monkeypatch) -> None:
    _strict_config(tmp_path, monkeypatch)
    ged = tmp_path / "unknown.ged"
    ged.write_text("0 HEAD\n0 @I1@ INDI\n1 FOO bar\n0 TRLR\n", encoding="utf-8")

    assert runner.invoke(app, ["stats", str(ged)]).exit_code == 1
    result = runner.invoke(app, ["stats", str(ged), "--lenient"])
    assert result.exit_code == 0, result.output


def test_module_logger_gets_one_file_handler() -> None:
    first = get_logger("loader.some_reader")
    second = get_logger("gedcom_document.loader.some_reader")

    assert first is second
    assert len(first.handlers) == 1
    assert first.handlers[0].baseFilename.endswith("gedcom_document_loader_some_reader.log")
    assert first.propagate is True
