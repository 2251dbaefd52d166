import pytest

from dhkeyxc.formatting import (
    format_message,
    htoi,
    htos,
    itoh,
    parse_message,
    stoh,
)
from dhkeyxc.primes import vetted_p


def test_itoh_pads_to_two_digits():
    assert itoh(2) == "02"


@pytest.mark.parametrize("value", [0, 1, 15, 16, 255, 256, 2**64 + 3, vetted_p(2048)])
def test_itoh_htoi_round_trip(value):
    text = itoh(value)
    assert len(text) >= 2
    assert text == text.lower()
    assert htoi(text) == value


def test_htoi_accepts_uppercase():
    assert htoi("FF") == htoi("ff")


@pytest.mark.parametrize("bad", ["", "xyz", "0x10", "1 2"])
def test_htoi_rejects_non_hex(bad):
    with pytest.raises(ValueError):
        htoi(bad)


def test_stoh_two_digits_per_byte():
    assert stoh(b"\x00\x01\xff") == "0001ff"


@pytest.mark.parametrize("data", [b"", b"\x00", bytes(range(256)), b"hello"])
def test_stoh_htos_round_trip(data):
    text = stoh(data)
    assert len(text) == 2 * len(data)
    assert htos(text, len(data)) == data


def test_htos_reads_only_prefix():
    data = b"\x10\x20\x30"
    assert htos(stoh(data), 2) == data[:2]


def test_htos_too_short():
    with pytest.raises(ValueError):
        htos("ab", 2)


def test_htos_not_hex():
    with pytest.raises(ValueError):
        htos("zz", 1)


def test_format_message_joins_with_delimiter():
    assert format_message(["ab", "cd"]) == "ab||cd"


@pytest.mark.parametrize("parts", [["p", "g"], ["one"], ["a", "b", "c"], ["", "x"]])
def test_format_parse_round_trip(parts):
    assert parse_message(format_message(parts)) == parts


def test_parse_message_without_delimiter():
    assert parse_message("abcdef") == ["abcdef"]


def test_parse_message_splits_left_to_right():
    assert parse_message("a|||b") == ["a", "|b"]


def test_handshake_style_message():
    p, g = vetted_p(1536), 2
    parts = parse_message(format_message([itoh(p), itoh(g)]))
    assert [htoi(part) for part in parts] == [p, g]