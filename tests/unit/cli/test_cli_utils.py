"""Unit tests for the CLI helpers."""

import time
from unittest.mock import patch

import pytest

from src.accounts.cli.utils import Stopwatch, ask, log_level_for
from src.accounts.core.validation import validate_full_name


class TestAsk:
    """Test the validating prompt helper."""

    def test_returns_first_valid_answer(self):
        with patch("src.accounts.cli.utils.Prompt.ask", side_effect=["chuck"]) as prompt:
            assert ask("First name", validate_full_name) == "chuck"

        assert prompt.call_count == 1

    def test_reasks_until_valid(self, capsys):
        answers = ["", "   ", "chuck1", "chuck"]
        with patch("src.accounts.cli.utils.Prompt.ask", side_effect=answers) as prompt:
            assert ask("First name", validate_full_name) == "chuck"

        assert prompt.call_count == 4
        err = capsys.readouterr().err
        assert err.count("can not be empty") == 2
        assert "only letters" in err

    def test_returns_validator_result(self):
        with patch("src.accounts.cli.utils.Prompt.ask", side_effect=["  chuck  "]):
            assert ask("First name", validate_full_name) == "chuck"


class TestLogLevelFor:
    @pytest.mark.parametrize(
        ("verbose", "quiet", "expected"),
        [
            (0, False, None),
            (1, False, None),
            (2, False, "INFO"),
            (3, False, "DEBUG"),
            (5, False, "DEBUG"),
            (3, True, "ERROR"),
        ],
    )
    def test_mapping(self, verbose, quiet, expected):
        assert log_level_for(verbose, quiet) == expected


class TestStopwatch:
    """Test the timing helper used by the verbose report."""

    def test_measures_elapsed_time(self):
        stopwatch = Stopwatch()
        stopwatch.start()
        time.sleep(0.01)
        event = stopwatch.stop()

        assert event.duration_ms >= 10
        assert event.peak_memory_bytes == 0

    def test_tracks_peak_memory(self):
        stopwatch = Stopwatch(track_memory=True)
        stopwatch.start()
        payload = [bytes(1024) for _ in range(2048)]
        event = stopwatch.stop()

        assert len(payload) == 2048
        assert event.peak_memory_bytes > 1024 * 1024
        assert event.memory_mb > 1

    def test_stop_without_start(self):
        with pytest.raises(RuntimeError, match="not started"):
            Stopwatch().stop()
