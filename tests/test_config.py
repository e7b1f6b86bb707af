import pytest

from pybundler.config import TestEnvironmentConfig, get_config
from pybundler.utils import is_hex_address, is_hex, is_hex_key


def test_record_has_exactly_five_fields():
    assert TestEnvironmentConfig._fields == (
        "signing_key",
        "node_url",
        "bundler_url",
        "test_erc20_token",
        "test_gas",
    )


def test_values():
    cfg = get_config()
    assert cfg.signing_key == "c6cbc5ffad570fdad0544d1b5358a36edeb98d163b6567912ac4754e144d4edb"
    assert cfg.node_url == "http://localhost:8545"
    assert cfg.bundler_url == "http://localhost:4337"
    assert cfg.test_erc20_token == "0x3870419Ba2BBf0127060bCB37f69A1b1C090992B"
    assert cfg.test_gas == "0xd98206114295d553625cFF946D8aEc3aa790db3A"


def test_every_field_is_a_non_empty_string():
    for value in get_config():
        assert isinstance(value, str)
        assert value


def test_address_and_key_formatting():
    cfg = get_config()
    assert is_hex_address(cfg.test_erc20_token)
    assert is_hex_address(cfg.test_gas)
    # Stored without a 0x prefix.
    assert len(cfg.signing_key) == 64
    assert is_hex(cfg.signing_key)
    assert is_hex_key(cfg.signing_key)


def test_access_is_reference_stable():
    assert get_config() is get_config()


def test_record_is_immutable():
    cfg = get_config()
    with pytest.raises(AttributeError):
        cfg.node_url = "http://example.com"
    assert get_config().node_url == "http://localhost:8545"
