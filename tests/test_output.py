import io

import pytest

from ftkit.output import (
    DECIMAL,
    HEX_LOWER,
    HEX_UPPER,
    printf,
    put_char,
    put_endl,
    put_nbr,
    put_str,
    render,
    to_base,
)


def test_put_char_writes_to_stream():
    out = io.StringIO()
    put_char("a", out)
    put_char("b", out)
    assert out.getvalue() == "ab"


def test_put_char_rejects_long_string():
    with pytest.raises(TypeError):
        put_char("ab", io.StringIO())


def test_put_str_and_endl():
    out = io.StringIO()
    put_str("hi ", out)
    put_endl("there", out)
    assert out.getvalue() == "hi there\n"


def test_put_str_defaults_to_stdout(capsys):
    put_str("visible")
    assert capsys.readouterr().out == "visible"


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 4096, 123456789])
@pytest.mark.parametrize("base,radix", [(DECIMAL, 10), (HEX_LOWER, 16), (HEX_UPPER, 16)])
def test_to_base_round_trip(n, base, radix):
    assert int(to_base(n, base), radix) == n


def test_to_base_custom_digits():
    assert to_base(5, "01") == "101"


def test_to_base_rejects_short_base():
    with pytest.raises(ValueError):
        to_base(3, "0")


def test_to_base_rejects_negative():
    with pytest.raises(ValueError):
        to_base(-1, DECIMAL)


def test_render_plain_text_and_percent():
    assert render("100%% done") == "100% done"


@pytest.mark.parametrize("n", [0, 42, -42, 2147483647, -2147483648])
def test_render_signed_round_trip(n):
    assert int(render("%d", n)) == n
    assert render("%i", n) == render("%d", n)


def test_render_signed_wraps_to_int():
    assert int(render("%d", 2**31)) == -(2**31)


def test_render_char_and_string():
    assert render("[%c|%s]", "z", "word") == "[z|word]"
    assert render("%c", ord("q")) == "q"


def test_render_null_string():
    assert render("%s", None) == "(null)"


@pytest.mark.parametrize("n", [0, 10, 255, 65535, 2**32 - 1])
def test_render_unsigned_and_hex_round_trip(n):
    assert int(render("%u", n)) == n
    assert int(render("%x", n), 16) == n
    assert render("%X", n) == render("%x", n).upper()


def test_render_unsigned_wraps_negative():
    assert int(render("%u", -1)) == 0xFFFFFFFF


def test_render_pointer():
    assert render("%p", 0) == "(nil)"
    assert render("%p", None) == "(nil)"
    text = render("%p", 4096)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 4096


def test_render_unknown_conversion_dropped():
    assert render("a%qb") == "ab"


def test_render_missing_argument_raises():
    with pytest.raises(TypeError):
        render("%d and %d", 1)


def test_render_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        render("%d", "nope")


def test_printf_writes_and_returns_length(capsys):
    length = printf("%s=%d\n", "x", -5)
    out = capsys.readouterr().out
    assert out == "x=-5\n"
    assert length == len(out)


def test_printf_rejects_missing_format():
    with pytest.raises(TypeError):
        printf(None)