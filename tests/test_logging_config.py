# Area: Shared Tests
"""Tests for salad_bowl._shared.logging_config."""

import json
import logging

from salad_bowl._shared.logging_config import (
    JSONFormatter,
    TerminalFormatter,
    log_game_error,
    setup_logging,
)
from salad_bowl.errors import OperationNotAllowed


def flush(pkg_logger):
    for handler in pkg_logger.handlers:
        handler.flush()


class TestSetupLogging:
    def teardown_method(self):
        pkg_logger = logging.getLogger("salad_bowl")
        for handler in list(pkg_logger.handlers):
            handler.close()
            pkg_logger.removeHandler(handler)

    def test_terminal_and_file_handlers(self, tmp_path):
        setup_logging(str(tmp_path / "game.log"))
        pkg_logger = logging.getLogger("salad_bowl")
        kinds = {type(h.formatter) for h in pkg_logger.handlers}
        assert kinds == {TerminalFormatter, JSONFormatter}
        assert pkg_logger.propagate is False

    def test_file_only(self, tmp_path):
        setup_logging(str(tmp_path / "game.log"), terminal=False)
        handlers = logging.getLogger("salad_bowl").handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.FileHandler)

    def test_repeated_setup_does_not_stack_handlers(self, tmp_path):
        setup_logging(str(tmp_path / "game.log"))
        setup_logging(str(tmp_path / "game.log"))
        assert len(logging.getLogger("salad_bowl").handlers) == 2

    def test_child_loggers_write_json_lines(self, tmp_path):
        log_file = tmp_path / "logs" / "game.log"
        setup_logging(str(log_file), terminal=False)

        logging.getLogger("salad_bowl.turn").info("Turn begins: %s", "Ann")
        flush(logging.getLogger("salad_bowl"))

        record = json.loads(log_file.read_text().splitlines()[-1])
        assert record["level"] == "INFO"
        assert record["logger"] == "salad_bowl.turn"
        assert record["message"] == "Turn begins: Ann"

    def test_log_game_error(self, tmp_path):
        log_file = tmp_path / "game.log"
        setup_logging(str(log_file), terminal=False)

        log_game_error(OperationNotAllowed("skip_disabled", "Skipping is not allowed in round 1"))
        flush(logging.getLogger("salad_bowl"))

        record = json.loads(log_file.read_text().splitlines()[-1])
        assert record["level"] == "WARNING"
        assert "OperationNotAllowed" in record["message"]
        assert "skip_disabled" in record["message"]


class TestTerminalFormatter:
    def test_levelname_restored_after_format(self):
        formatter = TerminalFormatter(fmt="%(levelname)s %(message)s")
        record = logging.LogRecord("salad_bowl", logging.INFO, __file__, 1, "hello", None, None)
        line = formatter.format(record)
        assert "hello" in line
        assert "\033[32m" in line
        assert record.levelname == "INFO"
