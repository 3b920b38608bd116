"""Unit tests for studentdash logging configuration."""

import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from studentdash.logging import ROOT_LOGGER_NAME, get_logger, mask_email, setup_logging


@pytest.fixture(autouse=True)
def _reset_handlers():
    """Detach handlers added by setup_logging after each test."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_creates_log_directory(self, tmp_path: Path) -> None:
        """Log directory is created if it doesn't exist."""
        log_dir = tmp_path / "nested" / "logs"
        setup_logging(log_dir=log_dir, console=False)

        assert log_dir.exists()

    def test_writes_to_log_file(self, tmp_path: Path) -> None:
        logger = setup_logging(log_dir=tmp_path, console=False)
        logger.info("test message 123")

        content = (tmp_path / "studentdash.log").read_text()
        assert "test message 123" in content

    def test_log_format(self, tmp_path: Path) -> None:
        """Entries carry level and component name."""
        setup_logging(log_dir=tmp_path, console=False)
        logging.getLogger("studentdash.state_store").warning("component test")

        content = (tmp_path / "studentdash.log").read_text()
        assert " | WARNING  | studentdash.state_store | component test" in content

    def test_level_from_argument(self, tmp_path: Path) -> None:
        logger = setup_logging(log_dir=tmp_path, level="debug", console=False)

        assert logger.level == logging.DEBUG

    def test_level_from_environment(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"STUDENTDASH_LOG_LEVEL": "WARNING"}):
            logger = setup_logging(log_dir=tmp_path, console=False)

        assert logger.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, tmp_path: Path) -> None:
        logger = setup_logging(log_dir=tmp_path, level="chatty", console=False)

        assert logger.level == logging.INFO

    def test_log_dir_from_environment(self, tmp_path: Path) -> None:
        log_dir = tmp_path / "from-env"
        with patch.dict(os.environ, {"STUDENTDASH_LOG_DIR": str(log_dir)}):
            setup_logging(console=False)

        assert (log_dir / "studentdash.log").exists()

    def test_repeated_setup_does_not_stack_handlers(self, tmp_path: Path) -> None:
        setup_logging(log_dir=tmp_path, console=True)
        logger = setup_logging(log_dir=tmp_path, console=True)

        assert len(logger.handlers) == 2

    def test_console_disabled(self, tmp_path: Path) -> None:
        logger = setup_logging(log_dir=tmp_path, console=False)

        assert len(logger.handlers) == 1


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger function."""

    def test_adds_prefix(self) -> None:
        assert get_logger("cli").name == "studentdash.cli"

    def test_keeps_existing_prefix(self) -> None:
        assert get_logger("studentdash.view").name == "studentdash.view"


@pytest.mark.unit
class TestMaskEmail:
    """Tests for mask_email function."""

    @pytest.mark.parametrize(
        ("email", "expected"),
        [
            ("jane.doe@example.com", "j***@example.com"),
            ("a@b.co", "a***@b.co"),
            ("not-an-email", "***"),
            ("@example.com", "***"),
            ("", "***"),
        ],
    )
    def test_mask(self, email: str, expected: str) -> None:
        assert mask_email(email) == expected
