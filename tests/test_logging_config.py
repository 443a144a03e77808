import logging

from waveviewer.config import AppConfig
from waveviewer.logging_config import LOGGER_NAME, setup_logging


def _config(tmp_path):
    return AppConfig(
        log_level="INFO",
        file_log_level="DEBUG",
        log_dir=str(tmp_path),
        log_file=str(tmp_path / "app.log"),
        assets_dir=str(tmp_path),
    )


def test_setup_logging_replaces_handlers(tmp_path):
    config = _config(tmp_path)
    logger = setup_logging(config)
    logger_again = setup_logging(config)

    assert logger is logger_again
    assert logger.name == LOGGER_NAME
    assert len(logger.handlers) == 2
    assert logger.propagate is False


def test_setup_logging_writes_debug_to_file(tmp_path):
    config = _config(tmp_path)
    logger = setup_logging(config)

    logger.debug("waveform ready: %s samples", 792)
    for handler in logger.handlers:
        handler.flush()

    content = (tmp_path / "app.log").read_text(encoding="utf-8")
    assert "waveform ready: 792 samples" in content
    assert "| DEBUG |" in content


def test_setup_logging_routes_warnings_to_file(tmp_path):
    setup_logging(_config(tmp_path))
    warnings_logger = logging.getLogger("py.warnings")
    assert len(warnings_logger.handlers) == 1
    assert isinstance(warnings_logger.handlers[0], logging.FileHandler)
