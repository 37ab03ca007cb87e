import pytest

from optkit import Option, Required


def test_option_with_default():
    quiet = Option("quiet", bool, False)
    assert not quiet.required
    assert not quiet.isSet()
    assert quiet.get() is False


def test_option_with_placeholder_and_default():
    until = Option("until", float, 0.0, "TIME")
    assert until.placeholder == "TIME"
    assert until.get() == 0.0
    assert not until.isSet()


def test_option_required():
    cmd = Option("cmd", str, Required, "COMMAND")
    assert cmd.required
    assert not cmd.isSet()
    assert cmd.get() is None


def test_option_set():
    times = Option("times", int, 0)
    times.set(3)
    assert times.isSet()
    assert times.get() == 3

    times.set(5)
    assert times.get() == 5


def test_option_set_to_default_value():
    quiet = Option("quiet", bool, False)
    quiet.set(False)
    assert quiet.isSet()
    assert quiet.get() is False


def test_option_invalid_names():
    for name in ["", "--foo", "-f", "a=b", "a b", "a.b"]:
        with pytest.raises(ValueError):
            Option(name, str, "")


def test_option_valid_names():
    for name in ["stop_on_error", "dry-run", "c++", "x1"]:
        assert Option(name, bool, False).name == name


def test_required_sentinel():
    assert repr(Required) == "Required"
    with pytest.raises(Exception):
        bool(Required)
