import pytest

from gridsnake.config import Config, HUD_HEIGHT
from gridsnake.main import build_config, parse_args


def test_defaults_give_a_20x20_board():
    cfg = Config()
    assert (cfg.grid_w, cfg.grid_h) == (20, 20)
    assert cfg.window_size == (400, 400 + HUD_HEIGHT)
    assert cfg.tick_ms == 150


def test_grid_truncates_partial_cells():
    cfg = Config(width=410, height=250, cell_size=20)
    assert (cfg.grid_w, cfg.grid_h) == (20, 12)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"cell_size": 0},
        {"width": 10},
        {"width": 30, "cell_size": 20},
        {"tick_ms": 10},
        {"tick_ms": 1000},
    ],
)
def test_invalid_config_is_rejected(kwargs):
    with pytest.raises(ValueError):
        Config(**kwargs)


def test_cli_flags_build_config():
    parser, args = parse_args(["--width", "600", "--speed", "80", "--seed", "3"])
    cfg = build_config(parser, args)
    assert cfg.grid_w == 30
    assert cfg.tick_ms == 80
    assert cfg.seed == 3
    assert args.log_level == "WARNING"


def test_cli_rejects_bad_board_as_usage_error():
    parser, args = parse_args(["--cell-size", "0"])
    with pytest.raises(SystemExit) as exc:
        build_config(parser, args)
    assert exc.value.code == 2
