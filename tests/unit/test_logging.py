import logging
from pathlib import Path

from bookstore.core.logging import setup_logging


class TestSetupLogging:
    def test_console_only_by_default(self) -> None:
        logger = setup_logging("bookstore-test-console")

        assert [type(h) for h in logger.handlers] == [logging.StreamHandler]

    def test_no_duplicate_handlers(self) -> None:
        first = setup_logging("bookstore-test-dupes")
        second = setup_logging("bookstore-test-dupes")

        assert first is second
        assert len(second.handlers) == 1

    def test_file_handler_when_log_dir_given(self, tmp_path: Path) -> None:
        log_dir = tmp_path / "logs"

        logger = setup_logging("bookstore-test-file", level="warning", log_dir=str(log_dir))
        logger.info("written to file only")
        for handler in logger.handlers:
            handler.flush()

        [log_file] = log_dir.glob("bookstore-test-file_*.log")
        assert "written to file only" in log_file.read_text()
        assert logger.handlers[0].level == logging.WARNING
