import pytest

from stripes39 import (
    Code39, EmptyInputError, ReservedCharacterError,
    UnsupportedCharacterError, VARIANTS, encode, encode_extended_mod43,
    encode_full_ascii, encode_mod43, encode_plain,
)


START_STOP = "010010100"


def test_alphabet_table():
    assert len(Code39.alphabet) == 44
    assert len(set(Code39.alphabet)) == 44
    assert len(Code39.pattern) == 44
    assert Code39.alphabet[-1] == Code39.sentinel == "*"
    assert Code39.index_of("0") == 0
    assert Code39.index_of("A") == 10
    assert Code39.index_of("%") == 42
    assert Code39.pattern_of("A") == 0b100001001


def test_three_wide_elements_in_every_pattern():
    for symbol in Code39.alphabet:
        flags = Code39.pattern_flags(symbol)
        assert len(flags) == 9
        assert sum(flags) == 3, symbol


def test_lookup_unknown_symbol():
    with pytest.raises(UnsupportedCharacterError):
        Code39.index_of("a")
    with pytest.raises(UnsupportedCharacterError):
        Code39.pattern_of("!")


def test_plain_single_character():
    assert encode_plain("A") == START_STOP + "0100001001" + "0" + START_STOP


def test_code_string_length():
    for payload in ("0", "HELLO WORLD", "-. $/+%", Code39.alphabet[:-1]):
        code_string = encode_plain(payload)
        assert len(code_string) == 19 + 10 * len(payload)
        assert set(code_string) <= {"0", "1"}
        assert code_string.startswith(START_STOP)
        assert code_string.endswith("0" + START_STOP)


def test_plain_uppercases_payload():
    assert encode_plain("abc") == encode_plain("ABC")


def test_plain_rejects_sentinel():
    with pytest.raises(ReservedCharacterError) as info:
        encode_plain("AB*C")
    assert info.value.position == 2


def test_plain_rejects_unsupported_character():
    with pytest.raises(UnsupportedCharacterError) as info:
        encode_plain("A!B")
    assert info.value.char == "!"
    assert info.value.position == 1


def test_empty_payload():
    for variant in VARIANTS:
        with pytest.raises(EmptyInputError):
            encode("", variant)
    with pytest.raises(EmptyInputError):
        Code39.code_string("")


def test_mod43_checksum():
    assert Code39.checksum("123") == 6
    assert Code39.with_checksum("123") == "1236"
    assert Code39.with_checksum("CODE39") == "CODE39W"
    assert Code39.with_checksum("abc") == "ABCX"
    assert encode_mod43("123") == encode_plain("1236")


def test_mod43_wraps_around():
    # 35 * 2 = 70, 70 % 43 = 27
    assert Code39.with_checksum("ZZ") == "ZZR"


def test_mod43_rejects_bad_input():
    with pytest.raises(UnsupportedCharacterError):
        encode_mod43("12!")
    with pytest.raises(ReservedCharacterError):
        encode_mod43("*")


def test_full_ascii():
    assert Code39.full_ascii("Hi!") == "H+I/A"
    assert Code39.full_ascii("a*z") == "+A/J+Z"
    assert Code39.full_ascii("A-1 $/+%.") == "A-1 $/+%."
    assert Code39.full_ascii("\t\n") == "$I$M"
    assert Code39.full_ascii("{|}~") == "%P%Q%R%S"
    assert encode_full_ascii("Hi!") == encode_plain("H+I/A")


def test_full_ascii_covers_printable_ascii():
    for code in range(32, 127):
        expanded = Code39.full_ascii(chr(code))
        assert 1 <= len(expanded) <= 2
        assert Code39.sentinel not in expanded
        assert all(symbol in Code39.alphabet for symbol in expanded)


@pytest.mark.parametrize("char", ["\x00", "\r", "\x7f", "\xe9", "☃"])
def test_full_ascii_rejects_unmapped(char):
    with pytest.raises(UnsupportedCharacterError) as info:
        encode_full_ascii("ab" + char)
    assert info.value.position == 2


def test_extended_mod43():
    # H=17, +=41, I=18, /=40, A=10, 126 % 43 = 40 -> "/"
    assert Code39.transform("Hi!", "extended_mod43") == "H+I/A/"
    assert encode_extended_mod43("Hi!") == encode_plain("H+I/A/")
    with pytest.raises(UnsupportedCharacterError):
        encode_extended_mod43("\x01")


def test_unknown_variant():
    with pytest.raises(ValueError):
        encode("ABC", "mod10")


def test_bars_match_code_string():
    bars = list(Code39.bars("Hi!", "full_ascii"))
    assert "".join(str(bit) for bit in bars) == encode_full_ascii("Hi!")


def test_encoding_is_repeatable():
    for variant in VARIANTS:
        assert encode("Code 39", variant) == encode("Code 39", variant)


def test_error_positions_follow_caller_text():
    # "ß" uppercases to two letters, it is refused in place
    with pytest.raises(UnsupportedCharacterError) as info:
        encode_plain("stra\xdfe")
    assert info.value.position == 4
    with pytest.raises(UnsupportedCharacterError) as info:
        encode_mod43("\xdf!")
    assert info.value.position == 0
    with pytest.raises(ReservedCharacterError) as info:
        encode_mod43("ab*")
    assert info.value.position == 2
