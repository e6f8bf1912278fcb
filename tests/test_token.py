import pytest

from disa.token import (
    Token,
    TokenType,
    VALUED_TYPES,
    format_tokens,
    new_char,
    new_id,
    new_int,
    new_string,
)


def test_token_type_str_is_name():
    assert str(TokenType.K_VOID) == "K_VOID"
    assert str(Token(TokenType.K_VOID)) == "K_VOID"
    assert str(Token(TokenType.BW_LSHIFT)) == "BW_LSHIFT"
    assert str(TokenType(TokenType.T_NOVALUE.value)) == "T_NOVALUE"


def test_token_type_families_are_contiguous():
    assert TokenType(TokenType.K_UNSIGNED.value + 1) is TokenType.SO_SIMPLE
    assert TokenType(TokenType.SO_RSHIFT.value + 1) is TokenType.RO_EQ
    assert TokenType(TokenType.RO_GE.value + 1) is TokenType.LO_NOT
    assert TokenType(TokenType.LO_AND.value + 1) is TokenType.BW_NOT
    assert TokenType(TokenType.BW_RSHIFT.value + 1) is TokenType.AO_SUM
    assert TokenType(TokenType.AO_MOD.value + 1) is TokenType.S_SQ
    assert TokenType(TokenType.S_SCOL.value + 1) is TokenType.L_C
    assert TokenType(TokenType.ID.value + 1) is TokenType.T_NOVALUE


def test_bitwise_offset_maps_to_assignment():
    # "|" shifted by five past SO_SIMPLE lands on "|="
    offset = TokenType.BW_OR.value - TokenType.BW_NOT.value
    assert TokenType(offset + TokenType.SO_SIMPLE.value + 5) is TokenType.SO_OR


def test_plain_token_has_no_value():
    tk = Token(TokenType.K_INT)
    assert not tk.has_value()
    assert str(tk) == "K_INT"


def test_char_token():
    tk = new_char("x")
    assert tk.type is TokenType.L_C
    assert tk.has_value()
    assert tk.value == "x"
    assert str(tk) == "L_C(x)"


def test_int_token_str():
    tk = new_int(123456789123456789)
    assert tk.type is TokenType.L_I
    assert str(tk) == "L_I(123456789123456789)"


def test_string_and_id_tokens():
    s = new_string("ciao   ")
    i = new_id("x12_")
    assert s.type is TokenType.L_S
    assert i.type is TokenType.ID
    assert str(s) == "L_S(ciao   )"
    assert str(i) == "ID(x12_)"


def test_tokens_compare_by_value():
    assert new_id("abc") == new_id("abc")
    assert new_id("abc") != new_string("abc")


@pytest.mark.parametrize("value", ["", "ab"])
def test_char_token_requires_single_character(value):
    with pytest.raises(ValueError):
        new_char(value)


def test_int_token_limits():
    assert new_int(2**63 - 1).value == 2**63 - 1
    assert new_int(-(2**63)).value == -(2**63)
    with pytest.raises(OverflowError):
        new_int(2**63)


def test_int_token_rejects_non_int():
    with pytest.raises(TypeError):
        Token(TokenType.L_I, "5")


def test_value_on_valueless_type_rejected():
    with pytest.raises(ValueError):
        Token(TokenType.S_SCOL, "x")


def test_id_requires_str():
    with pytest.raises(TypeError):
        Token(TokenType.ID, 3)


def test_valued_types():
    made = {new_char("a").type, new_int(1).type, new_string("s").type, new_id("i").type}
    assert made == VALUED_TYPES
    assert VALUED_TYPES == {TokenType.L_C, TokenType.L_I, TokenType.L_S, TokenType.ID}


def test_format_tokens_empty():
    assert format_tokens([]) == "tlist[]"


def test_format_tokens_sequence():
    items = [Token(TokenType.K_INT), new_id("s"), Token(TokenType.SO_SIMPLE), new_int(0)]
    text = format_tokens(items)
    assert text.startswith("tlist[") and text.endswith("]")
    assert text[len("tlist["):-1].split(", ") == [str(t) for t in items]


def test_format_tokens_accepts_generator():
    items = [Token(TokenType.S_OP), Token(TokenType.S_CP)]
    assert format_tokens(t for t in items) == format_tokens(items)