import pytest

from bytekit.colors import Color

_NAMES = [member.name for member in Color]


def test_red_escape_sequence():
    assert Color("\033[0;31m") is Color.RED
    assert Color.RED.wrap("") == "\033[0;31m\033[0m"


def test_reset_aliases_share_one_member():
    reset = Color("\033[0m")
    assert Color.CRESET is reset
    assert Color.COLOR_RESET is reset
    assert Color.RESET.wrap("x") == "\033[0mx\033[0m"


def test_str_gives_raw_sequence():
    green = Color("\033[1;32m")
    assert green is Color.BGRN
    assert str(green) == "\033[1;32m"
    assert f"{green}x" == "\033[1;32mx"


def test_wrap_surrounds_text_with_colour_and_reset():
    wrapped = Color.RED.wrap("hello")
    assert wrapped == "\033[0;31mhello\033[0m"


@pytest.mark.parametrize("name", _NAMES)
def test_every_color_is_an_escape_sequence(name):
    value = Color[name].value
    assert Color(value) is Color[name]
    assert value.startswith("\033[")
    assert value.endswith("m")


@pytest.mark.parametrize("name", _NAMES)
def test_wrap_keeps_text_intact(name):
    wrapped = Color[name].wrap("payload")
    prefix = Color[name].value
    reset = Color("\033[0m").value
    assert wrapped.startswith(prefix)
    assert wrapped.endswith(reset)
    assert wrapped[len(prefix) : -len(reset)] == "payload"


def test_lookup_by_value():
    assert Color("\033[44m") is Color.BLUB


def test_distinct_colours_have_distinct_sequences():
    wrapped = {Color(member.value).wrap("") for member in Color}
    assert len(wrapped) == len(Color)