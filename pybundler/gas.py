#!/usr/bin/python3
from .config import DEFAULT_TIMEOUT
from .rpc import send, eth_maxPriorityFeePerGas
from .utils import hex_to_int

def mean_of(batch, field):
    '''Integer mean of `field` across a batch of user operations'''
    if len(batch) == 0:
        raise ValueError("Cannot suggest gas values for an empty batch")
    return sum(hex_to_int(op[field]) for op in batch) // len(batch)

def suggest_mean_gas_tip_cap(node_url, batch, timeout=DEFAULT_TIMEOUT):
    '''Max priority fee for an EIP-1559 bundle transaction: the larger of the node's suggested
       tip (eth_maxPriorityFeePerGas) and the batch's mean maxPriorityFeePerGas.'''
    avg = mean_of(batch, "maxPriorityFeePerGas")
    tip = hex_to_int(send(eth_maxPriorityFeePerGas(), node_url, timeout))
    return avg if avg > tip else tip

def suggest_mean_gas_fee_cap(basefee, batch):
    '''Max fee for an EIP-1559 bundle transaction: the larger of twice the base fee and the
       batch's mean maxFeePerGas.'''
    mf = hex_to_int(basefee) * 2
    avg = mean_of(batch, "maxFeePerGas")
    return avg if avg > mf else mf

def suggest_mean_gas_price(gas_price, batch):
    '''Gas price for a legacy bundle transaction: the larger of `gas_price` and the batch's
       mean maxFeePerGas.'''
    gas_price = hex_to_int(gas_price)
    avg = mean_of(batch, "maxFeePerGas")
    return avg if avg > gas_price else gas_price
