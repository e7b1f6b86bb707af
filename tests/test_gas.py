import json

import pytest

from pybundler import gas


def user_op(max_fee, max_priority_fee):
    return {"maxFeePerGas": hex(max_fee), "maxPriorityFeePerGas": hex(max_priority_fee)}


def node_tip(monkeypatch, tip):
    methods = []

    def fake_send(payload, url, timeout):
        methods.append((json.loads(payload)["method"], url, timeout))
        return hex(tip)

    monkeypatch.setattr(gas, "send", fake_send)
    return methods


def test_tip_cap_prefers_batch_mean(monkeypatch):
    methods = node_tip(monkeypatch, 10)
    batch = [user_op(0, 20), user_op(0, 31)]
    assert gas.suggest_mean_gas_tip_cap("http://localhost:8545", batch) == 25
    assert methods == [("eth_maxPriorityFeePerGas", "http://localhost:8545", 15)]


def test_tip_cap_prefers_node_suggestion(monkeypatch):
    node_tip(monkeypatch, 100)
    assert gas.suggest_mean_gas_tip_cap("http://localhost:8545", [user_op(0, 20)]) == 100


def test_tip_cap_empty_batch_does_not_call_node(monkeypatch):
    methods = node_tip(monkeypatch, 100)
    with pytest.raises(ValueError):
        gas.suggest_mean_gas_tip_cap("http://localhost:8545", [])
    assert methods == []


def test_fee_cap_is_twice_basefee_at_least():
    assert gas.suggest_mean_gas_fee_cap(50, [user_op(60, 0)]) == 100
    assert gas.suggest_mean_gas_fee_cap("0x32", [user_op(60, 0)]) == 100


def test_fee_cap_prefers_batch_mean():
    assert gas.suggest_mean_gas_fee_cap(10, [user_op(30, 0), user_op(50, 0)]) == 40


def test_fee_cap_tie_returns_reference():
    assert gas.suggest_mean_gas_fee_cap(20, [user_op(40, 0)]) == 40


def test_gas_price():
    assert gas.suggest_mean_gas_price(100, [user_op(10, 0)]) == 100
    assert gas.suggest_mean_gas_price("0x64", [user_op(150, 0), user_op(251, 0)]) == 200


def test_mean_uses_floor_division():
    assert gas.mean_of([user_op(1, 0), user_op(2, 0)], "maxFeePerGas") == 1


def test_mean_accepts_int_values():
    assert gas.mean_of([{"maxFeePerGas": 7}, {"maxFeePerGas": "0x9"}], "maxFeePerGas") == 8


def test_empty_batch():
    with pytest.raises(ValueError):
        gas.suggest_mean_gas_price(1, [])
    with pytest.raises(ValueError):
        gas.suggest_mean_gas_fee_cap(1, [])


def test_tip_cap_passes_timeout_to_node(monkeypatch):
    methods = node_tip(monkeypatch, 1)
    gas.suggest_mean_gas_tip_cap("http://localhost:8545", [user_op(0, 2)], timeout=3)
    assert methods == [("eth_maxPriorityFeePerGas", "http://localhost:8545", 3)]
