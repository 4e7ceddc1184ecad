import pytest

from barstatus.config import ARGS, COMPONENTS, UNKNOWN_STR, Arg


def test_render_substitutes_value():
    assert Arg(str.upper, "<%s>", "ab").render("?") == "<AB>"


def test_render_uses_unknown_for_none():
    assert Arg(lambda: None, "x %s").render("n/a") == "x n/a"


def test_render_without_argument_calls_with_no_arguments():
    assert Arg(lambda: "42", "%s%%").render("?") == "42%"


def test_render_literal_percent():
    assert Arg(lambda: "5", "%%%s%%").render("?") == "%5%"


def test_render_rejects_other_conversions():
    with pytest.raises(ValueError):
        Arg(lambda: "1", "%d").render("?")


def test_render_rejects_trailing_percent():
    with pytest.raises(ValueError):
        Arg(lambda: "1", "%s %").render("?")


def test_separator_component_passes_text_through():
    assert COMPONENTS["separator"]("-") == "-"
    assert Arg(COMPONENTS["separator"], "%s", " | ").render(UNKNOWN_STR) == " | "


def test_default_layout_formats_are_valid():
    for arg in ARGS:
        rendered = Arg(lambda: None, arg.fmt).render(UNKNOWN_STR)
        assert "%s" not in rendered


def test_components_are_callable():
    assert all(callable(func) for func in COMPONENTS.values())
    assert COMPONENTS["gid"]().isdigit()