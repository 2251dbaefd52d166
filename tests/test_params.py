from dhkeyxc.params import AESParams, ConfigParams, DHParams


def test_config_defaults():
    config = ConfigParams()
    assert config.debug is False
    assert config.quiet is False
    assert config.verbose is False
    assert config.log_path == "log"
    assert config.server is False
    assert config.bits == 2048
    assert config.ip_addr == "127.0.0.1"
    assert config.port == 65000


def test_config_fields_can_be_overridden():
    config = ConfigParams(server=True, bits=4096, port=50000)
    assert (config.server, config.bits, config.port) == (True, 4096, 50000)
    assert ConfigParams().bits == 2048


def test_dh_params_start_unset():
    dh = DHParams()
    assert [dh.p, dh.g, dh.a, dh.A, dh.B, dh.dh_key] == [None] * 6


def test_dh_params_instances_are_independent():
    first = DHParams()
    second = DHParams()
    first.p = 23
    assert second.p is None
    assert first == DHParams(p=23)


def test_aes_params_defaults():
    aes = AESParams()
    assert aes.aes_key == bytes(32)
    assert len(aes.aes_key) == 32
    assert aes.aes_iv is None