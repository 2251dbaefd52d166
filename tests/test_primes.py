import pytest

from dhkeyxc.primes import vetted_g, vetted_p

ALL_BITS = [1536, 2048, 3072, 4096, 6144, 8192]
LOW_64 = (1 << 64) - 1


@pytest.mark.parametrize("bits", ALL_BITS)
def test_prime_has_requested_size(bits):
    assert vetted_p(bits).bit_length() == bits


@pytest.mark.parametrize("bits", ALL_BITS)
def test_prime_top_and_bottom_words_are_all_ones(bits):
    p = vetted_p(bits)
    assert p & LOW_64 == LOW_64
    assert p >> (bits - 64) == LOW_64


@pytest.mark.parametrize("bits", ALL_BITS)
def test_prime_shares_rfc_prefix(bits):
    assert format(vetted_p(bits), "X").startswith("FFFFFFFFFFFFFFFFC90FDAA22168C234")


@pytest.mark.parametrize("bits", ALL_BITS)
def test_generator_lies_in_prime_order_subgroup(bits):
    p = vetted_p(bits)
    assert pow(vetted_g(), p - 1, p) == 1
    assert pow(vetted_g(), (p - 1) // 2, p) == 1


def test_primes_are_distinct():
    assert len({vetted_p(bits) for bits in ALL_BITS}) == len(ALL_BITS)


def test_generator_is_two():
    assert vetted_g() == 2


@pytest.mark.parametrize("bits", [0, 1024, 2047, 16384])
def test_unsupported_sizes_are_rejected(bits):
    with pytest.raises(ValueError):
        vetted_p(bits)