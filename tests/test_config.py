"""
Tests for configuration defaults, validation and CLI parsing.
"""

import pytest

from retro_snake.config import CFG, Config
from retro_snake.main import parse_args


class TestConfig:
    def test_defaults(self):
        assert CFG.board_size == 20
        assert CFG.cell_size == 22
        assert CFG.move_interval_ms == 110
        assert CFG.seed is None

    @pytest.mark.parametrize(
        "kwargs",
        [{"board_size": 7}, {"cell_size": 0}, {"move_interval_ms": 0}, {"move_interval_ms": -5}],
    )
    def test_rejects_bad_values(self, kwargs):
        with pytest.raises(ValueError):
            Config(**kwargs)


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.seed is None
        assert args.board_size == 20
        assert args.cell_size == 22
        assert args.interval_ms == 110
        assert args.log_level == "WARNING"

    def test_overrides(self):
        args = parse_args(["--seed", "5", "--board-size", "12", "--interval-ms", "80", "--log-level", "DEBUG"])
        assert (args.seed, args.board_size, args.interval_ms, args.log_level) == (5, 12, 80, "DEBUG")

    def test_bad_log_level(self):
        with pytest.raises(SystemExit):
            parse_args(["--log-level", "LOUD"])
