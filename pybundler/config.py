#!/usr/bin/env python3

from typing import NamedTuple

class TestEnvironmentConfig(NamedTuple):
    '''Endpoints, key and contract addresses the end-to-end suite runs against.'''
    __test__ = False

    signing_key: str
    node_url: str
    bundler_url: str
    test_erc20_token: str
    test_gas: str

_e2e_config = TestEnvironmentConfig(
    # This is for testing only. DO NOT use in production.
    signing_key="c6cbc5ffad570fdad0544d1b5358a36edeb98d163b6567912ac4754e144d4edb",
    node_url="http://localhost:8545",
    bundler_url="http://localhost:4337",
    test_erc20_token="0x3870419Ba2BBf0127060bCB37f69A1b1C090992B",
    # https://github.com/stackup-wallet/contracts/blob/main/contracts/test/TestGas.sol
    test_gas="0xd98206114295d553625cFF946D8aEc3aa790db3A",
)

DEFAULT_TIMEOUT = 15

def get_config():
    return _e2e_config
