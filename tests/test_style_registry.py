import arcade
import pytest

from postip.components.tooltip_style import TooltipStyle
from postip.styles.colors import is_valid_color, lookup_color
from postip.styles.registry import StyleRegistry, default_style_registry, resolve_style


@pytest.mark.parametrize(
    "value",
    ["black", "LightYellow", "lightblue", "pink", "purple", "WHITE_SMOKE", "white smoke", "light-steel-blue", "#fff", "#a0b1c2", "#a0b1c2ff", (1, 2, 3), (1, 2, 3, 4), [0, 0, 0]],
)
def test_valid_colours(value):
    assert is_valid_color(value)


@pytest.mark.parametrize(
    "value",
    [None, "", "   ", "notacolour", "fff", "#12", "#gggggg", (1, 2), (256, 0, 0), (1.0, 2, 3), (True, 0, 0), 42],
)
def test_invalid_colours(value):
    assert not is_valid_color(value)


def test_registry_rejects_duplicates_unless_replacing():
    registry = StyleRegistry()
    registry.register("calm", TooltipStyle(background="white"))
    with pytest.raises(ValueError):
        registry.register("calm", TooltipStyle())
    registry.register("calm", TooltipStyle(background="black"), replace=True)
    assert registry.get("calm").background == "black"


def test_registry_unknown_name_raises_key_error():
    with pytest.raises(KeyError):
        StyleRegistry().get("missing")


def test_default_registry_has_tooltip_style():
    assert default_style_registry.has("tooltip")


def test_resolution_layers_explicit_named_default():
    registry = StyleRegistry()
    registry.register("tooltip", TooltipStyle(foreground="black", background="white", internal_border_width=4))
    resolved = resolve_style(
        TooltipStyle(foreground="#123456"),
        registry=registry,
        border_width=1,
        internal_border_width=2,
    )
    assert resolved.foreground == "#123456"
    assert resolved.background == "white"
    assert resolved.border_width == 1
    assert resolved.internal_border_width == 4


def test_unknown_named_style_falls_back_to_default():
    registry = StyleRegistry()
    registry.register("tooltip", TooltipStyle(foreground="purple"))
    resolved = resolve_style("missing", registry=registry)
    assert resolved.foreground == "purple"
    assert resolved.background is None


def test_missing_default_style_leaves_colours_unset():
    resolved = resolve_style(None, registry=StyleRegistry(), default_name="nope")
    assert resolved.foreground is None
    assert resolved.background is None


def test_names_come_from_arcade_colour_table():
    assert lookup_color("lightblue") == arcade.color.LIGHT_BLUE
    assert lookup_color("Antique White") == arcade.color.ANTIQUE_WHITE
    assert lookup_color("#102030") == (16, 32, 48, 255)
    assert lookup_color((1, 2, 3)) == (1, 2, 3, 255)


def test_common_colour_names_survive_resolution():
    resolved = resolve_style(TooltipStyle(foreground="pink", background="lightblue"), registry=StyleRegistry())
    assert resolved.foreground == "pink"
    assert resolved.background == "lightblue"


def test_registry_lists_registered_names():
    registry = StyleRegistry()
    registry.register("calm", TooltipStyle())
    registry.register("alert", TooltipStyle(foreground="red"))
    assert registry.names() == ("calm", "alert")
