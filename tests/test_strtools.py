import pytest

from brawldefender.strtools import (
    clean_arr,
    clean_str,
    extract_str,
    format_printf,
    getnbr,
    nbr_len,
    power,
    rm_from_array,
    square_root,
    str_as_numbers,
    str_is_alphanumeric,
    str_isalpha,
    str_isnum,
    str_to_word_array,
    to_binary,
    to_hex,
    to_octal,
)


@pytest.mark.parametrize(
    "text, expected",
    [("-42", -42), ("--42", 42), ("abc-12x", -12), ("-a5", 5), ("+7", 7), ("x99y1", 99)],
)
def test_getnbr_cases(text, expected):
    assert getnbr(text) == expected


def test_getnbr_round_trip():
    for number in range(-300, 300, 7):
        assert getnbr(str(number)) == number


def test_getnbr_without_digits_raises():
    with pytest.raises(ValueError):
        getnbr("no digits here")


def test_nbr_len():
    assert nbr_len(0) == 1
    for number in (1, 9, 10, 12345, 10**9):
        assert nbr_len(number) == len(str(number))
    assert nbr_len(-5) == 0


def test_power():
    assert power(7, 0) == 1
    assert power(2, -1) == 0
    for base in range(-4, 5):
        for exponent in range(1, 6):
            assert power(base, exponent) == base**exponent


def test_square_root_small_numbers_settle_on_floor_root():
    for number in range(1, 3200):
        root = int(square_root(number))
        assert root * root <= number < (root + 1) * (root + 1)


def test_square_root_large_numbers_use_fixed_steps():
    assert square_root(3200) == 1600.0
    for number in (3200, 6400, 50000):
        root = int(square_root(number))
        assert root * root >= number


def test_square_root_rejects_zero():
    with pytest.raises(ValueError):
        square_root(0)


def test_str_to_word_array():
    assert str_to_word_array("hello world", " ") == ["hello", "world"]
    assert str_to_word_array("  a  b", " ") == ["a", "b"]
    assert str_to_word_array("a b ", " ") == ["a", "b", ""]
    assert str_to_word_array("", " ") == [""]


def test_str_to_word_array_join_round_trip():
    words = ["PATH=/bin", "HOME=/root", "USER=me"]
    assert str_to_word_array(":".join(words), ":") == words


def test_str_to_word_array_bad_separator():
    with pytest.raises(ValueError):
        str_to_word_array("a b", "  ")


def test_clean_str_and_arr():
    assert clean_str("a,b,c", ",") == "abc"
    assert clean_str("none", ",") == "none"
    assert clean_arr(["x y", " z "], " ") == ["xy", "z"]


def test_rm_from_array():
    items = ["a", "b", "c"]
    assert rm_from_array(items, 1) == ["a", "c"]
    assert rm_from_array(items, 0) == ["b", "c"]
    assert items == ["a", "b", "c"]
    with pytest.raises(IndexError):
        rm_from_array(items, 3)


def test_character_class_checks():
    assert str_isalpha("Hello") is True
    assert str_isalpha("He_llo") is False
    assert str_isalpha("abc1") is False
    assert str_isalpha("") is True
    assert str_isnum("0123456789") is True
    assert str_isnum("12a") is False
    assert str_is_alphanumeric("abc123") is True
    assert str_is_alphanumeric("Abc") is False
    assert str_is_alphanumeric("a b") is False


def test_binary_and_octal_round_trip():
    for number in range(1, 500):
        assert int(to_binary(number), 2) == number
        assert int(to_octal(number), 8) == number
    assert to_binary(0) == ""
    assert to_octal(-3) == ""


def test_to_hex_matches_except_leading_one():
    for number in range(2, 2000):
        expected = format(number, "x")
        if expected.startswith("1"):
            expected = expected[1:]
        assert to_hex(number) == expected
        assert to_hex(number, upper=True) == expected.upper()


def test_to_hex_upper_is_unsigned():
    assert to_hex(-1, upper=True) == "FFFFFFFF"
    assert to_hex(-1) == ""


def test_format_printf_basic():
    assert format_printf("%d apples", 5) == "5 apples"
    assert format_printf("%s-%c", "ab", "x") == "ab-x"
    assert format_printf("%c", 65) == "A"
    assert format_printf("100%%") == "100%"
    assert format_printf("%i|%b|%o", -3, 5, 9) == "-3|" + to_binary(5) + "|" + to_octal(9)
    assert format_printf("%x%X", 255, 255) == to_hex(255) + to_hex(255, upper=True)


def test_format_printf_unsigned():
    assert format_printf("%u", -1) == "4294967295"
    assert format_printf("%u", 42) == "42"


def test_format_printf_error_goes_to_stderr(capsys):
    assert format_printf("a%eb", "oops") == "ab"
    assert capsys.readouterr().err == "oops"


def test_format_printf_errors():
    with pytest.raises(ValueError):
        format_printf("trailing %")
    with pytest.raises(ValueError):
        format_printf("%d %d", 1)


def test_str_as_numbers():
    assert str_as_numbers("AB") == "6566"
    assert str_as_numbers("") == ""


def test_extract_str_round_trip(tmp_path):
    target = tmp_path / "help.txt"
    target.write_text("USAGE\n ./game\n")
    assert extract_str(target) == "USAGE\n ./game\n"
    assert extract_str(str(target)) == "USAGE\n ./game\n"


def test_extract_str_missing_file(tmp_path):
    with pytest.raises(OSError):
        extract_str(tmp_path / "missing.txt")