import pytest

from dhkeyxc.dhmath import (
    dh_key,
    private_a,
    public_a,
    rand_between,
    select_public_dh_params,
)
from dhkeyxc.params import ConfigParams, DHParams, ExchangeError
from dhkeyxc.primes import vetted_p


def test_rand_between_is_strictly_inside_bounds():
    seen = {rand_between(1, 4) for _ in range(200)}
    assert seen <= {2, 3}
    assert seen == {2, 3}


def test_rand_between_single_value():
    assert all(rand_between(10, 12) == 11 for _ in range(20))


@pytest.mark.parametrize("lower, upper", [(1, 2), (5, 5), (7, 3)])
def test_rand_between_empty_range(lower, upper):
    with pytest.raises(ValueError):
        rand_between(lower, upper)


def test_private_a_requires_p():
    with pytest.raises(ExchangeError):
        private_a(DHParams())


def test_private_a_range():
    dh = DHParams(p=vetted_p(1536), g=2)
    for _ in range(20):
        private_a(dh)
        assert 1 < dh.a < dh.p - 1


def test_public_a_requires_values():
    with pytest.raises(ExchangeError):
        public_a(DHParams(p=23, g=5))


def test_dh_key_requires_b():
    with pytest.raises(ExchangeError):
        dh_key(DHParams(p=23, g=5, a=6))


def test_worked_example():
    alice = DHParams(p=23, g=5, a=6)
    bob = DHParams(p=23, g=5, a=15)
    public_a(alice)
    public_a(bob)
    assert alice.A == 8
    alice.B = bob.A
    bob.B = alice.A
    dh_key(alice)
    dh_key(bob)
    assert alice.dh_key == bob.dh_key == 2


def test_both_sides_agree_with_vetted_prime():
    config = ConfigParams(bits=2048)
    alice, bob = DHParams(), DHParams()
    select_public_dh_params(config, alice)
    select_public_dh_params(config, bob)
    for side in (alice, bob):
        private_a(side)
        public_a(side)
    alice.B, bob.B = bob.A, alice.A
    dh_key(alice)
    dh_key(bob)
    assert alice.dh_key == bob.dh_key
    assert 0 <= alice.dh_key < alice.p


@pytest.mark.parametrize("bits", [1536, 2048, 3072, 4096, 6144, 8192])
def test_select_public_params(bits):
    dh = DHParams()
    select_public_dh_params(ConfigParams(bits=bits), dh)
    assert dh.p == vetted_p(bits)
    assert dh.p.bit_length() == bits
    assert dh.g == 2


def test_select_public_params_bad_bits():
    with pytest.raises(ExchangeError):
        select_public_dh_params(ConfigParams(bits=1024), DHParams())