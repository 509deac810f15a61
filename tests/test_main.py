import pytest

from map_explorer.main import parse_args


def test_parse_args_defaults():
    args = parse_args([])

    assert args.screen_width is None
    assert args.map_path is None
    assert args.minimap_visible is None
    assert args.log_level == "WARNING"


def test_parse_args_overrides():
    args = parse_args(["--width", "1024", "--height", "768", "--map", "world.tmx",
                       "--seed", "7", "--hide-minimap"])

    assert (args.screen_width, args.screen_height) == (1024, 768)
    assert args.map_path == "world.tmx"
    assert args.seed == 7
    assert args.minimap_visible is False


@pytest.mark.parametrize("flag", ["--width", "--fps", "--tile-size"])
def test_parse_args_rejects_non_positive(flag):
    with pytest.raises(SystemExit):
        parse_args([flag, "0"])


def test_map_help_mentions_default_asset(capsys):
    with pytest.raises(SystemExit):
        parse_args(["--help"])

    help_text = " ".join(capsys.readouterr().out.split())
    assert "assets/map.png" in help_text
