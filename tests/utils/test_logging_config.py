import logging
import pytest
from unittest.mock import patch, MagicMock
from utils.logging_config import setup_logging, verbosity_to_level


@pytest.mark.parametrize("verbosity, level", [
    (0, logging.CRITICAL + 1),
    (1, logging.INFO),
    (2, logging.DEBUG),
    (5, logging.DEBUG),
])
def test_verbosity_to_level(verbosity, level):
    assert verbosity_to_level(verbosity) == level


def test_setup_logging_verbosity_0():
    """Test that verbosity 0 disables all logging."""
    with patch('logging.getLogger') as mock_get_logger:
        mock_logger = MagicMock()
        mock_get_logger.return_value = mock_logger

        setup_logging(verbosity=0)

        mock_logger.setLevel.assert_called_once_with(logging.CRITICAL + 1)
        mock_logger.handlers.clear.assert_called_once()
        assert mock_logger.addHandler.call_count == 0


def test_setup_logging_verbosity_2():
    """Test that verbosity >1 sets DEBUG level on logger and console handler."""
    with patch('logging.getLogger') as mock_get_logger, \
         patch('logging.StreamHandler') as mock_stream_handler:
        mock_logger = MagicMock()
        mock_get_logger.return_value = mock_logger
        mock_handler = MagicMock()
        mock_stream_handler.return_value = mock_handler

        setup_logging(verbosity=2)

        mock_logger.setLevel.assert_called_once_with(logging.DEBUG)
        mock_logger.addHandler.assert_called_once_with(mock_handler)
        mock_handler.setLevel.assert_called_once_with(logging.DEBUG)


def test_setup_logging_with_file(tmp_path):
    """Test that records reach the log file when logfile is provided."""
    logfile = tmp_path / "digestkit.log"

    setup_logging(verbosity=1, logfile=str(logfile))
    logging.getLogger("digestkit.test").info("hello from the test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = logfile.read_text(encoding="utf-8")
    assert "hello from the test" in content
    assert "Command line:" in content


def test_setup_logging_command_line_logging():
    """Test that the command line is logged."""
    with patch('logging.getLogger') as mock_get_logger, \
         patch('sys.argv', ['digestkit', '-v', 'digest']):
        mock_logger = MagicMock()
        mock_get_logger.return_value = mock_logger

        setup_logging(verbosity=1)

        mock_logger.info.assert_any_call("Command line: digestkit -v digest")
