import pytest

from ftlib.printf import itoa_base, numlen_base, printf, sprintf

HEX = "0123456789abcdef"


def test_numlen_zero():
    assert numlen_base(0, 10) == 1


@pytest.mark.parametrize("n", [0, 1, 9, 10, 255, 256, 4294967295])
@pytest.mark.parametrize("digits", ["01", "0123456789", HEX])
def test_numlen_matches_itoa_length(n, digits):
    assert numlen_base(n, len(digits)) == len(itoa_base(n, digits))


def test_numlen_decimal_matches_str():
    assert numlen_base(4294967295, 10) == len(str(4294967295))


def test_numlen_errors():
    with pytest.raises(ValueError):
        numlen_base(-1, 10)
    with pytest.raises(ValueError):
        numlen_base(5, 1)


def test_itoa_base_zero():
    assert itoa_base(0, HEX) == "0"


@pytest.mark.parametrize("n", [1, 15, 16, 305419896, 4294967295, 2**63])
def test_itoa_base_hex_round_trip(n):
    assert int(itoa_base(n, HEX), 16) == n


@pytest.mark.parametrize("n", [1, 2, 42, 1023])
def test_itoa_base_binary_round_trip(n):
    assert int(itoa_base(n, "01"), 2) == n


def test_itoa_base_errors():
    with pytest.raises(ValueError):
        itoa_base(5, "0")
    with pytest.raises(ValueError):
        itoa_base(-5, HEX)


def test_int_limits():
    assert sprintf("%d", 2147483647) == "2147483647"
    assert sprintf("%d", -2147483648) == "-2147483648"
    assert sprintf("%i", -123456789) == "-123456789"
    assert sprintf("%d", 0) == "0"


def test_unsigned():
    assert sprintf("%u", 4294967295) == "4294967295"
    assert sprintf("%u", 0) == "0"


def test_unsigned_wraps_negative():
    assert sprintf("%u", -1) == sprintf("%u", 4294967295)


def test_signed_wraps_large():
    assert sprintf("%d", 4294967295) == sprintf("%d", -1)


@pytest.mark.parametrize("n", [0, 42, 305419896, 4294967295])
def test_hex_round_trip(n):
    lower = sprintf("%x", n)
    upper = sprintf("%X", n)
    assert int(lower, 16) == n
    assert lower == lower.lower()
    assert upper == lower.upper()


def test_string_cases():
    assert sprintf("%s", "Test string") == "Test string"
    assert sprintf("%s", None) == "(null)"
    assert sprintf("[%s]", "") == "[]"


def test_char_cases():
    assert sprintf("%c%c", "A", ord("Z")) == "AZ"
    assert sprintf("%c", "\0") == "\0"


def test_pointer_nil():
    assert sprintf("%p", None) == "(nil)"
    assert sprintf("%p", 0) == "(nil)"


def test_pointer_address():
    text = sprintf("%p", 0x1000)
    assert text.startswith("0x")
    assert int(text, 16) == 0x1000


def test_pointer_object():
    obj = object()
    assert int(sprintf("%p", obj), 16) == id(obj)


def test_percent_signs():
    assert sprintf("Percent signs: %% %%") == "Percent signs: % %"


def test_unknown_spec_consumes_nothing():
    assert sprintf("a%qb%d", 5) == "ab5"


def test_trailing_percent_dropped():
    assert sprintf("50%") == "50"


def test_combined_line():
    text = sprintf(
        "Combined: char %c, string %s, int %d, unsigned %u, hex %X, ptr %p, %%\n",
        "Q", "Test string", -42, 4294967295, 305419896, None,
    )
    assert text == (
        "Combined: char Q, string Test string, int -42, "
        "unsigned 4294967295, hex 12345678, ptr (nil), %\n"
    )


def test_missing_argument():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_wrong_argument_type():
    with pytest.raises(TypeError):
        sprintf("%d", "x")
    with pytest.raises(TypeError):
        sprintf("%s", 5)


def test_fmt_must_be_str():
    with pytest.raises(TypeError):
        sprintf(None)


def test_printf_writes_and_counts(capsys):
    count = printf("String test: %s | %d\n", "Hello, 42!", 42)
    out = capsys.readouterr().out
    assert out == sprintf("String test: %s | %d\n", "Hello, 42!", 42)
    assert count == len(out)


def test_printf_empty(capsys):
    assert printf("") == 0
    assert capsys.readouterr().out == ""