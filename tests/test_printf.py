import pytest

from fromage.printf import format_printf, hex_digits, pointer_text, print_formatted


def test_plain_text_is_unchanged():
    assert format_printf("hello world") == "hello world"


def test_step_line():
    assert format_printf("Nombres de pas : %d\n", 3) == "Nombres de pas : 3\n"


def test_string_and_null():
    assert format_printf("[%s]", "abc") == "[abc]"
    assert format_printf("%s", None) == "(null)"


def test_char_from_int_and_str():
    assert format_printf("%c%c", ord("Z"), "y") == "Zy"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_printf("%c", "ab")


def test_signed_wraps_to_32_bits():
    assert int(format_printf("%d", 2**31)) == -(2**31)
    assert int(format_printf("%i", -42)) == -42


def test_unsigned_wraps():
    assert int(format_printf("%u", -1)) == 2**32 - 1


def test_hex_of_minus_one():
    assert format_printf("%x", -1) == "ffffffff"
    assert format_printf("%X", -1) == "ffffffff".upper()


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 4096, 2**31 - 1, 2**32 - 1])
def test_hex_round_trip(n):
    assert int(hex_digits(n), 16) == n
    assert int(hex_digits(n, True), 16) == n
    assert hex_digits(n, True) == hex_digits(n).upper()


def test_pointer_text():
    assert pointer_text(None) == "(nil)"
    assert pointer_text(0) == "(nil)"
    text = pointer_text(0xDEADBEEF)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0xDEADBEEF
    assert format_printf("%p", 0) == "(nil)"


def test_percent_handling():
    assert format_printf("100%%") == "100%"
    assert format_printf("100%") == "100%"
    assert format_printf("%q") == "%q"


def test_missing_argument():
    with pytest.raises(TypeError):
        format_printf("%d and %d", 1)


def test_none_format():
    with pytest.raises(TypeError):
        format_printf(None)


def test_print_formatted_writes_and_counts(capsys):
    count = print_formatted("%s=%d\n", "steps", 7)
    out = capsys.readouterr().out
    assert out == "steps=7\n"
    assert count == len(out)