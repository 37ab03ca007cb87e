import json

from optkit import example
from optkit.example import Mode, Unit


ARGS = ["--cmd=ls", "--mode=after", "--timeout", "2.5", "--unit=m"]


def test_example_value_maps():
    assert example.registry.convert(Mode, "oneshot") is Mode.ONE_SHOT
    assert example.registry.convert(Mode, "after") is Mode.ONE_SHOT
    assert example.registry.convert(Mode, "every") is Mode.REPEAT
    assert example.registry.convert(Unit, "hr") is Unit.HOUR
    assert example.registry.convert(Unit, "s") is Unit.SECOND


def test_example_report(capsys):
    assert example.main(ARGS + ["--times=3"]) == 0
    out = capsys.readouterr().out

    assert "           cmd: ls\n" in out
    assert "          mode: oneshot\n" in out
    assert "       timeout: 2.5\n" in out
    assert "          unit: minutes\n" in out
    assert "         times: 3\n" in out
    assert "         quiet: false (unset)\n" in out
    assert "         until: 0.0 (unset)\n" in out


def test_example_missing_required_continues(capsys):
    assert example.main(["--cmd=ls"]) == 0
    captured = capsys.readouterr()

    assert "required options are not set" in captured.err
    assert "Usage: optkit-example --cmd=COMMAND" in captured.err
    assert "          mode:  (unset)\n" in captured.out


def test_example_hard_failure(capsys):
    assert example.main(ARGS + ["--bogus=1"]) == 1
    captured = capsys.readouterr()
    assert "Unknown option '--bogus'" in captured.err
    assert captured.out == ""


def test_example_json(capsys):
    assert example.main(ARGS + ["--json"]) == 0
    data = json.loads(capsys.readouterr().out)

    assert data["cmd"] == "ls"
    assert data["mode"] == "oneshot"
    assert data["unit"] == "minute"
    assert data["timeout"] == 2.5
    assert data["quiet"] is False
    assert "quiet" in data["unset"]
    assert "cmd" not in data["unset"]


def test_example_negative_times(capsys):
    assert example.main(ARGS + ["--times=-3"]) == 1
    assert "'-3' is negative" in capsys.readouterr().err
