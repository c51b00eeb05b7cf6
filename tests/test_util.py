import pytest

from deconzlib.util import app_argument_numeric, app_argument_string, utf8_codepoint


@pytest.mark.parametrize("char", ["A", "é", "€", "😀"])
def test_utf8_codepoint_matches_python_decoding(char):
    data = char.encode("utf-8")
    cp, nxt = utf8_codepoint(data)
    assert cp == ord(char)
    assert nxt == len(data)


def test_utf8_codepoint_walks_a_string():
    text = "aé€😀z"
    data = text.encode("utf-8")
    pos = 0
    decoded = []
    while pos < len(data):
        cp, pos = utf8_codepoint(data, pos)
        decoded.append(chr(cp))
    assert "".join(decoded) == text


def test_utf8_codepoint_accepts_str():
    cp, nxt = utf8_codepoint("ü")
    assert cp == ord("ü")
    assert nxt == 2


def test_utf8_codepoint_invalid_lead_byte():
    assert utf8_codepoint(b"\x80abc") == (None, 1)


def test_utf8_codepoint_truncated_sequence():
    assert utf8_codepoint(b"\xe2\x82") == (None, 1)


def test_utf8_codepoint_nul_terminates_sequence():
    assert utf8_codepoint(b"\xc3\x00") == (None, 1)


def test_utf8_codepoint_position_out_of_range():
    with pytest.raises(IndexError):
        utf8_codepoint(b"ab", 2)


def test_numeric_argument_found():
    assert app_argument_numeric("--port", 80, ["prog", "--port=8080"]) == 8080


def test_numeric_argument_negative():
    assert app_argument_numeric("--level", 0, ["prog", "--level=-3"]) == -3


def test_numeric_argument_missing_uses_default():
    assert app_argument_numeric("--port", 80, ["prog", "--other=1"]) == 80


def test_numeric_argument_invalid_uses_default():
    assert app_argument_numeric("--port", 80, ["prog", "--port=abc"]) == 80


def test_numeric_argument_out_of_int32_range_uses_default():
    assert app_argument_numeric("--port", 80, ["prog", "--port=99999999999"]) == 80


def test_numeric_argument_longer_name_is_skipped():
    assert app_argument_numeric("--port", 80, ["prog", "--portx=5", "--port=7"]) == 7


def test_numeric_argument_first_match_wins_even_if_invalid():
    assert app_argument_numeric("--port", 80, ["prog", "--port=", "--port=7"]) == 80


def test_string_argument_found():
    assert app_argument_string("--appdata", "", ["prog", "--appdata=/tmp/x"]) == "/tmp/x"


def test_string_argument_empty_value_uses_default():
    assert app_argument_string("--appdata", "dflt", ["prog", "--appdata="]) == "dflt"


def test_string_argument_without_value_uses_default():
    assert app_argument_string("--appdata", "dflt", ["prog", "--appdata"]) == "dflt"


def test_string_argument_with_extra_equals_uses_default():
    assert app_argument_string("--x", "dflt", ["prog", "--x=a=b"]) == "dflt"