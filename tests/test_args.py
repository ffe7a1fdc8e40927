import pytest

from keyid.args import Args, Mode, parse_args


def test_defaults():
    args = parse_args([])
    assert args == Args()
    assert args.mode == "suggest"
    assert args.from_date == "1970-01-01"
    assert args.start_with == ""
    assert args.random is False
    assert args.m3u is False
    assert args.debug is False


def test_mode_values():
    assert Mode.GENERATE == "generate"
    assert Mode.SUGGEST == "suggest"
    assert parse_args(["-mode", "generate"]).mode == Mode.GENERATE


def test_single_dash_options():
    args = parse_args([
        "-mode", "generate",
        "-from", "2023-05-01",
        "-startWith", "Intro",
        "-tags", "Warmup,Peak",
        "-excludeTags", "Vocal",
        "-playlist", "Friday",
        "-random",
        "-m3u",
        "-debug",
    ])
    assert args == Args(
        mode="generate",
        from_date="2023-05-01",
        start_with="Intro",
        tags="Warmup,Peak",
        exclude_tags="Vocal",
        playlist="Friday",
        random=True,
        m3u=True,
        debug=True,
    )


def test_double_dash_options():
    args = parse_args(["--playlist", "Friday", "--random"])
    assert args.playlist == "Friday"
    assert args.random is True
    assert args.m3u is False


def test_unknown_option_exits():
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["-nope"])
    assert excinfo.value.code == 2