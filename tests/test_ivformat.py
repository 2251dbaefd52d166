import pytest

from dhkeyxc.ivformat import form_int, form_iv


def test_full_width_iv_is_big_endian():
    value = int.from_bytes(bytes(range(1, 13)), "big")
    assert form_iv(value) == bytes(range(1, 13))


def test_short_iv_is_placed_at_the_start():
    assert form_iv(1) == b"\x01" + bytes(11)


def test_zero_iv():
    assert form_iv(0) == bytes(12)


@pytest.mark.parametrize("value", [0, 1, 255, 256, 2**64, 2**96 - 1])
def test_iv_always_has_requested_length(value):
    assert len(form_iv(value)) == 12


@pytest.mark.parametrize("value", [2**88, 2**95 + 12345, 2**96 - 1])
def test_round_trip_for_full_width_values(value):
    assert form_int(form_iv(value)) == value


def test_custom_length():
    assert form_iv(0xABCD, 4) == b"\xab\xcd\x00\x00"


def test_too_large_iv_is_rejected():
    with pytest.raises(ValueError):
        form_iv(2**96)


def test_negative_iv_is_rejected():
    with pytest.raises(ValueError):
        form_iv(-1)


def test_form_int_reads_big_endian():
    assert form_int(b"\x01\x00") == 256
    assert form_int(bytes(12)) == 0