from __future__ import annotations

import logging
from io import StringIO

import horas_extras.logging.init as log_init
from horas_extras.logging.init import (
    LOGGER_NAME,
    SUMMARY_LEVEL,
    LabeledFormatter,
    get_logger,
    log_summary,
    setup_logging,
)


def test_setup_logging_creates_logger_with_labeled_formatter():
    logger = setup_logging()

    assert logger.name == LOGGER_NAME
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, LabeledFormatter)
    assert logger.propagate is False


def test_setup_logging_idempotent():
    logger1 = setup_logging()
    logger2 = setup_logging()

    assert logger1 is logger2
    assert len(logger1.handlers) == 1


def test_setup_logging_debug_raises_level():
    setup_logging()
    logger = setup_logging(debug=True)
    assert logger.level == logging.DEBUG
    assert all(h.level == logging.DEBUG for h in logger.handlers)


def test_get_logger_returns_configured_logger():
    assert get_logger() is setup_logging()


def test_labeled_prefixes():
    captured = StringIO()
    logger = logging.getLogger("test_horas_extras_labels")
    logger.setLevel(logging.INFO)
    for h in logger.handlers[:]:
        logger.removeHandler(h)
    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
    handler = logging.StreamHandler(captured)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    logger.info("info message")
    logger.warning("warning message")
    logger.error("error message")
    logger.log(SUMMARY_LEVEL, "summary message")

    assert captured.getvalue().strip().split("\n") == [
        "INFO info message",
        "WARN warning message",
        "ERROR error message",
        "SUMMARY summary message",
    ]


def test_module_loggers_propagate_to_app_logger(capsys):
    setup_logging()
    logging.getLogger("horas_extras.services.orchestrator").info("desde el orquestador")
    assert "INFO desde el orquestador" in capsys.readouterr().out


def test_log_summary(capsys):
    setup_logging()
    log_summary("files=1/1 success=1 failed=0")
    assert "SUMMARY files=1/1 success=1 failed=0" in capsys.readouterr().out


def test_reset_logging():
    setup_logging()
    log_init.reset_logging()
    assert log_init._logger is None
