import pytest

from term_tags.color import Color
from term_tags.numeric import NumericColor, parse_numeric


class TestSingle:
    @pytest.mark.parametrize(
        "text,value",
        [
            ("0", 0),
            ("1", 1),
            ("255", 255),
            ("013", 11),
            ("0377", 255),
            ("0xe", 14),
            ("0x0f", 15),
            ("0XFF", 255),
            (" 5", 5),
            ("+7", 7),
            ("-0", 0),
        ],
    )
    def test_valid(self, text, value):
        numeric = parse_numeric(text)
        assert numeric == (value, None, None, None)
        assert not numeric.is_triple
        assert numeric.color is None

    @pytest.mark.parametrize(
        "text",
        [
            "",
            " ",
            "256",
            "0x100",
            "0400",
            "-5",
            "08",
            "0x",
            "5 ",
            "5x",
            "1.5",
            "red",
            "١",
        ],
    )
    def test_invalid(self, text):
        assert parse_numeric(text) is None


class TestTriple:
    @pytest.mark.parametrize(
        "text,rgb",
        [
            ("0.0.1", (0, 0, 1)),
            ("255.153.0", (255, 153, 0)),
            ("179,179,180", (179, 179, 180)),
            ("229;229;228", (229, 229, 228)),
            ("230:230:231", (230, 230, 231)),
            ("0xff.0xff.0xbf", (255, 255, 191)),
            ("0xFF.0xFF.0xFF", (255, 255, 255)),
            ("1.2,3", (1, 2, 3)),
            ("010.0x10.10", (8, 16, 10)),
        ],
    )
    def test_valid(self, text, rgb):
        numeric = parse_numeric(text)
        assert numeric.is_triple
        assert numeric[1:] == rgb
        assert numeric.value == rgb[0] << 16 | rgb[1] << 8 | rgb[2]
        assert numeric.color == Color(*rgb)

    @pytest.mark.parametrize(
        "text",
        [
            "256.256.256",
            "0.0.256",
            "1.2",
            "1.2.3.4",
            "1.2.",
            ".1.2",
            "1..2",
            "1.2.3 ",
            "-1.0.0",
        ],
    )
    def test_invalid(self, text):
        assert parse_numeric(text) is None


class TestInput:
    @pytest.mark.parametrize("text", [b"0x0f", bytearray(b"15"), memoryview(b"15")])
    def test_bytes_like(self, text):
        assert parse_numeric(text) == NumericColor(15)

    @pytest.mark.parametrize("text", [None, 15, 1.5])
    def test_invalid_type(self, text):
        with pytest.raises(TypeError, match="'text'"):
            parse_numeric(text)
