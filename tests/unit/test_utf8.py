import pytest

from decoded_char import DecodedChar, ErrorPolicy, InvalidSequence, TruncatedSequence, Utf8Decoded


def test_ascii_character():
    assert list(Utf8Decoded(b"A")) == [DecodedChar("A", 1)]


def test_three_byte_character():
    assert list(Utf8Decoded(b"\xe2\x82\xac")) == [DecodedChar("€", 3)]


def test_mixed_widths_and_position():
    decoder = Utf8Decoded("aé€\U0001F600".encode("utf-8"))
    assert next(decoder) == DecodedChar("a", 1)
    assert decoder.position == 1
    assert [char.len for char in decoder] == [2, 3, 4]
    assert decoder.position == decoder.offset == 10


def test_accepts_any_iterator_of_ints():
    source = iter([0x68, 0x69])
    assert [char.value for char in Utf8Decoded(source)] == ["h", "i"]


def test_lone_lead_byte_is_truncated():
    decoder = Utf8Decoded(b"\xe2")
    with pytest.raises(TruncatedSequence) as excinfo:
        next(decoder)
    assert excinfo.value.position == 0
    assert excinfo.value.units == (0xE2,)
    assert list(decoder) == []


def test_truncation_after_valid_prefix():
    decoder = Utf8Decoded(b"ok\xf0\x9f\x98")
    assert next(decoder).value == "o"
    assert next(decoder).value == "k"
    with pytest.raises(TruncatedSequence) as excinfo:
        next(decoder)
    assert excinfo.value.position == 2
    assert excinfo.value.units == (0xF0, 0x9F, 0x98)


def test_truncation_raises_even_when_replacing():
    with pytest.raises(TruncatedSequence):
        list(Utf8Decoded(b"a\xe2\x82", errors="replace"))


def test_lone_continuation_byte_is_invalid():
    with pytest.raises(InvalidSequence) as excinfo:
        list(Utf8Decoded(b"\x82"))
    assert excinfo.value.position == 0
    assert excinfo.value.units == (0x82,)
    assert "invalid utf-8 sequence at unit 0" in str(excinfo.value)


def test_invalid_position_counts_preceding_units():
    decoder = Utf8Decoded(b"ab\xff")
    assert [next(decoder).value, next(decoder).value] == ["a", "b"]
    with pytest.raises(InvalidSequence) as excinfo:
        next(decoder)
    assert excinfo.value.position == 2


@pytest.mark.parametrize(
    "data",
    [
        b"\xc0\xaf",  # overlong "/"
        b"\xe0\x80\xaf",  # overlong three-byte form
        b"\xed\xa0\x80",  # encoded surrogate
        b"\xf4\x90\x80\x80",  # above U+10FFFF
        b"\xf5\x80\x80\x80",
    ],
)
def test_ill_formed_sequences_are_rejected(data: bytes):
    with pytest.raises(InvalidSequence):
        list(Utf8Decoded(data))


def test_strict_decoder_continues_after_error():
    decoder = Utf8Decoded(b"\xe2A")
    with pytest.raises(InvalidSequence) as excinfo:
        next(decoder)
    assert excinfo.value.units == (0xE2, 0x41)
    assert decoder.position == 1
    assert next(decoder) == DecodedChar("A", 1)


def test_replace_policy_substitutes_inherent_replacement():
    decoded = list(Utf8Decoded(b"\x82A", errors=ErrorPolicy.REPLACE))
    assert decoded == [DecodedChar("�", 3), DecodedChar("A", 1)]


def test_replace_policy_resynchronises_on_breaking_unit():
    decoded = list(Utf8Decoded(b"\xe2\x82A\xe2\x82\xac", errors="replace"))
    assert [char.value for char in decoded] == ["�", "A", "€"]
    assert [char.len for char in decoded] == [3, 1, 3]


def test_unknown_policy_is_rejected():
    with pytest.raises(ValueError):
        Utf8Decoded(b"", errors="ignore")


def test_replacement_is_silent_without_logging_configured(capsys):
    list(Utf8Decoded(b"\xffA", errors="replace"))
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_truncation_is_silent_without_logging_configured(capsys):
    with pytest.raises(TruncatedSequence):
        next(Utf8Decoded(b"\xe2"))
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
