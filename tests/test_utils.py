import json
import logging
from pathlib import Path

from fars.utils.logging import JsonFormatter, configure_logging
from fars.utils.paths import resolve_data_dir


# ---------------------------------------------------------------------------
# resolve_data_dir
# ---------------------------------------------------------------------------

def test_resolve_data_dir_explicit_wins(tmp_path, monkeypatch):
    monkeypatch.setenv("FARS_DATA_DIR", "/somewhere/else")
    assert resolve_data_dir(tmp_path) == tmp_path
    assert resolve_data_dir(str(tmp_path)) == tmp_path


def test_resolve_data_dir_env(monkeypatch):
    monkeypatch.setenv("FARS_DATA_DIR", "/data/fars")
    assert resolve_data_dir() == Path("/data/fars")


def test_resolve_data_dir_cwd(tmp_path, monkeypatch):
    monkeypatch.delenv("FARS_DATA_DIR", raising=False)
    monkeypatch.chdir(tmp_path)
    assert resolve_data_dir() == Path.cwd()


# ---------------------------------------------------------------------------
# logging
# ---------------------------------------------------------------------------

def _record(**extra):
    record = logging.LogRecord(
        name="fars.data.reader",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="invalid year: %s",
        args=(2014,),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_payload():
    payload = json.loads(JsonFormatter().format(_record(year=2014)))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "fars.data.reader"
    assert payload["msg"] == "invalid year: 2014"
    assert payload["year"] == 2014
    assert "lineno" not in payload


def test_json_formatter_non_serializable_extra():
    payload = json.loads(JsonFormatter().format(_record(path=Path("a/b.csv.bz2"))))
    assert payload["path"] == str(Path("a/b.csv.bz2"))


def test_configure_logging_is_idempotent():
    logger = logging.getLogger("fars")
    before = list(logger.handlers)
    try:
        configure_logging("DEBUG")
        configure_logging("INFO", json_format=True)

        added = [h for h in logger.handlers if h not in before]
        assert len(added) == 1
        assert isinstance(added[0].formatter, JsonFormatter)
        assert logger.level == logging.INFO
    finally:
        for handler in list(logger.handlers):
            if handler not in before:
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
