import logging
from pathlib import Path

from querysense.logger import LOGGER_NAME, setup_logger


class TestSetupLogger:
    def test_console_handler_only_by_default(self) -> None:
        logger = setup_logger("WARNING")

        assert logger.name == LOGGER_NAME
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.WARNING

    def test_file_handler_records_debug(self, tmp_path: Path) -> None:
        log_file = tmp_path / "analysis.log"
        logger = setup_logger(logging.INFO, log_file)

        logging.getLogger("querysense.core.analyzer").debug("scored query")
        for handler in logger.handlers:
            handler.flush()

        assert len(logger.handlers) == 2
        assert "DEBUG - scored query" in log_file.read_text()

    def test_repeated_setup_replaces_handlers(self) -> None:
        setup_logger()
        logger = setup_logger()

        assert len(logger.handlers) == 1

    def test_does_not_propagate_to_root(self, caplog) -> None:
        logger = setup_logger()

        with caplog.at_level(logging.INFO):
            logging.getLogger("querysense.core.pipeline").info("delivered 1 report(s)")

        assert logger.propagate is False
        assert "delivered 1 report(s)" not in caplog.text
