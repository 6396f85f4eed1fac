import pytest

from term_tags.modes import Depth, Direction
from term_tags.registry import MAX_NAME_LENGTH, ColorDefinition, iter_colors, lookup


class TestColorDefinition:
    def test_defines_nothing(self):
        with pytest.raises(ValueError, match="defines nothing"):
            ColorDefinition("nothing")

    def test_frozen(self):
        definition = lookup("red")
        with pytest.raises(AttributeError):
            definition.sgr_fg = 32

    def test_is_mode_change(self):
        assert ColorDefinition("x", forces_depth=Depth.FOUR).is_mode_change
        assert ColorDefinition(
            "x", forces_direction=Direction.BACKGROUND
        ).is_mode_change
        assert not ColorDefinition("x", sgr_fg=1).is_mode_change


class TestLookup:
    @pytest.mark.parametrize(
        "name,fg,bg,palette,rgb",
        [
            ("black", 30, 40, 0, 0x000000),
            ("red", 31, 41, 1, 0xBB0000),
            ("white", 37, 47, 7, 0xBBBBBB),
            ("bblack", 90, 100, 8, 0x7F7F7F),
            ("bwhite", 97, 107, 15, 0xFFFFFF),
        ],
    )
    def test_base_colors(self, name, fg, bg, palette, rgb):
        definition = lookup(name)
        assert definition.name == name
        assert (definition.sgr_fg, definition.sgr_bg) == (fg, bg)
        assert definition.palette_index == palette
        assert definition.rgb == rgb

    @pytest.mark.parametrize(
        "name,palette,rgb",
        [
            ("azure", 25, 0x0066BB),
            ("tan", 94, 0x886600),
            ("silver", 102, 0x888888),
            ("borange", 208, 0xFF8800),
        ],
    )
    def test_extended_colors(self, name, palette, rgb):
        definition = lookup(name)
        assert definition.sgr_fg is None
        assert definition.palette_index == palette
        assert definition.rgb == rgb

    @pytest.mark.parametrize(
        "alias,name",
        [
            ("purple", "magenta"),
            ("bpurple", "bmagenta"),
            ("gray", "bblack"),
            ("grey", "bblack"),
            ("bright", "bold"),
            ("underline", "under"),
            ("reverse", "inverse"),
            ("nobright", "nobold"),
            ("nofaint", "nobold"),
            ("unbold", "nobold"),
            ("unbright", "nobold"),
            ("unfaint", "nobold"),
            ("unblink", "noblink"),
            ("nobg", "fg"),
        ],
    )
    def test_aliases(self, alias, name):
        assert lookup(alias) is lookup(name)

    @pytest.mark.parametrize("name", ["RED", "Red", b"rEd", bytearray(b"red")])
    def test_case_insensitive(self, name):
        assert lookup(name) is lookup("red")

    def test_memoryview(self):
        assert lookup(memoryview(b"bold")) is lookup("bold")

    @pytest.mark.parametrize(
        "name",
        [
            "",
            "mismatch",
            "re",
            "redd",
            " red",
            "red ",
            "c",
            "\u0155ed",
            "x" * 64,
            b"\xffred",
        ],
    )
    def test_no_match(self, name):
        assert lookup(name) is None

    @pytest.mark.parametrize("name", [None, 1, ["red"]])
    def test_invalid_type(self, name):
        with pytest.raises(TypeError, match="'name'"):
            lookup(name)

    def test_mode_changes(self):
        assert lookup("4-bit").forces_depth is Depth.FOUR
        assert lookup("8-bit").forces_depth is Depth.EIGHT
        assert lookup("24-bit").forces_depth is Depth.TWENTY_FOUR
        assert lookup("fg").forces_direction is Direction.FOREGROUND
        assert lookup("bg").forces_direction is Direction.BACKGROUND

    def test_literal(self):
        assert lookup("esc").literal_replacement == "\x1b"

    def test_max_name_length(self):
        assert MAX_NAME_LENGTH == len("underline")


class TestIterColors:
    def test_all(self):
        definitions = list(iter_colors(displayable_only=False))
        assert len(definitions) == 48
        assert definitions[0].name == "black"
        assert definitions[-1].name == "esc"
        assert len({definition.name for definition in definitions}) == 48

    def test_displayable_only(self):
        names = [definition.name for definition in iter_colors()]
        assert "red" in names
        assert "bold" in names
        for name in ("nobold", "noinv", "4-bit", "fg", "bg", "esc"):
            assert name not in names

    def test_order(self):
        names = [definition.name for definition in iter_colors()]
        assert names.index("black") < names.index("normal") < names.index("azure")
