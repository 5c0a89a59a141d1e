import logging

from cag.utils.logging import get_logger


def test_console_handler_only_by_default(monkeypatch):
    monkeypatch.delenv("CAG_LOG_DIR", raising=False)

    logger = get_logger("cag.tests.console")

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)
    assert logger.handlers[0].level == logging.INFO


def test_repeated_calls_do_not_duplicate_handlers(monkeypatch):
    monkeypatch.delenv("CAG_LOG_DIR", raising=False)

    get_logger("cag.tests.repeat")
    logger = get_logger("cag.tests.repeat")

    assert len(logger.handlers) == 1


def test_explicit_log_file(tmp_path):
    log_file = tmp_path / "nested" / "run.log"

    logger = get_logger("cag.tests.file", log_file=log_file)
    logger.debug("written to file")
    for handler in logger.handlers:
        handler.flush()

    assert "written to file" in log_file.read_text()


def test_log_dir_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("CAG_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("CAG_LOG_LEVEL", "WARNING")

    logger = get_logger("cag.tests.envdir")
    logger.warning("to the default file")
    for handler in logger.handlers:
        handler.flush()

    assert logger.handlers[0].level == logging.WARNING
    assert "to the default file" in (tmp_path / "cag_tests_envdir.log").read_text()
