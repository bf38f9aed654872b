import pytest

from vibrant import __version__
from vibrant.cli import format_channels, main


def test_main_prints_bytes(capsys):
    assert main(["#fff"]) == 0
    assert capsys.readouterr().out.strip() == "255 255 255 255"


def test_main_function_notation(capsys):
    assert main(["hsl(180 50% 50%)"]) == 0
    assert capsys.readouterr().out.strip() == "64 191 191 255"


def test_main_float_format(capsys):
    assert main(["--format", "f64", "rgba(255, 0, 0, 0.5)"]) == 0
    assert capsys.readouterr().out.strip() == "1.000000 0.000000 0.000000 0.501961"


def test_main_single_precision(capsys):
    assert main(["--precision", "single", "--format", "f32", "red"]) == 0
    assert capsys.readouterr().out.strip() == "1.000000 0.000000 0.000000 1.000000"


def test_main_invalid_color(capsys):
    assert main(["rgb(0, 0 0)"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "invalid color" in captured.err


def test_main_rejects_unknown_format():
    with pytest.raises(SystemExit) as excinfo:
        main(["--format", "u16", "red"])
    assert excinfo.value.code == 2


def test_main_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_format_channels():
    assert format_channels((1, 2, 3, 4), "u8") == "1 2 3 4"
    assert format_channels((0.5, 0.25, 0.0, 1.0), "f32") == "0.500000 0.250000 0.000000 1.000000"
