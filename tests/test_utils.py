import pytest

from string_literal_finder.source import CharacterLocation, LineInfo
from string_literal_finder.utils import camel_case, is_generated_file, to_posix


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello world", "helloWorld"),
        ("Save & Exit", "saveExit"),
        ("HTTPServer error", "httpServerError"),
        ("already camelCase", "alreadyCamelCase"),
        ("404 not found", "text404NotFound"),
        ("!!!", "text"),
        ("", "text"),
    ],
)
def test_camel_case(text, expected):
    assert camel_case(text) == expected


def test_generated_files():
    assert is_generated_file("lib/model.g.dart")
    assert not is_generated_file("lib/model.dart")


def test_to_posix():
    assert to_posix("lib\\src\\a.dart") == "lib/src/a.dart"


def test_line_info_locations():
    info = LineInfo("ab\ncd\r\n\nef")
    assert info.get_location(0) == CharacterLocation(1, 1)
    assert info.get_location(4) == CharacterLocation(2, 2)
    assert info.get_location(8) == CharacterLocation(4, 1)
    assert str(info.get_location(4)) == "2:2"


def test_line_info_line_end():
    content = "ab\ncd\r\nef"
    info = LineInfo(content)
    assert info.get_line_end(1) == 2
    assert info.get_line_end(3) == 5
    assert info.get_line_end(8) == len(content)
    assert info.get_offset_of_line_after(3) == 7
