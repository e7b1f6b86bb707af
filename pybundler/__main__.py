#!/usr/bin/python3

import argparse
import json
from .config import get_config, DEFAULT_TIMEOUT
from .gas import suggest_mean_gas_tip_cap, suggest_mean_gas_fee_cap, suggest_mean_gas_price
from .preflight import run_preflight
from .rpc import RPCError, send, eth_getBlockByNumber, eth_gasPrice
from .utils import *
import os

FEE_FIELDS = ["maxFeePerGas", "maxPriorityFeePerGas"]

def make_parser():
    parser = argparse.ArgumentParser(prog="pybundler")
    subparsers = parser.add_subparsers(dest='command')
    parser.add_argument('-t', '--timeout', type=int, default=DEFAULT_TIMEOUT, metavar="<seconds>",
                      help="Timeout for each RPC request (default: %(default)s)")

    subparsers.add_parser('show', help='Print the end-to-end test configuration as JSON.')

    subparsers.add_parser('check', help='Check that the node, bundler and test contracts are reachable.')

    gasParser = subparsers.add_parser('gas', help='Suggest bundle gas values for a batch of user operations.')
    gasParser.add_argument('-f', '--file', type=str, required=True, metavar="<user ops>",
                      help="Path to a JSON list of user operations")
    return parser

def show(cfg):
    notif("This signing key is for testing only. DO NOT use in production.", colors.fg.orange)
    print(json.dumps(cfg._asdict(), indent=2))
    return 0

def check(cfg, timeout):
    report = run_preflight(cfg, timeout)
    return 0 if report.ok else 1

def is_valid_user_op(op):
    if not isinstance(op, dict):
        return False
    for field in FEE_FIELDS:
        value = op.get(field)
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            return False
    return True

def load_batch(file_path):
    if not os.path.isfile(file_path):
        fatal("Invalid file: " + file_path)
    with open(file_path) as f:
        try:
            batch = json.load(f)
        except ValueError as err:
            fatal("Could not parse " + file_path + ": " + str(err))
    if not isinstance(batch, list) or len(batch) == 0:
        fatal("Expected a non-empty JSON list of user operations in " + file_path)
    for index, op in enumerate(batch):
        if not is_valid_user_op(op):
            fatal("Invalid user operation at index " + str(index) + " in " + file_path + ": " + json.dumps(op))
    return batch

def suggest_gas(cfg, file_path, timeout):
    batch = load_batch(file_path)
    block = send(eth_getBlockByNumber("latest"), cfg.node_url, timeout)
    if not isinstance(block, dict) or "baseFeePerGas" not in block:
        fatal("Latest block has no baseFeePerGas, the node does not support EIP-1559")
    suggestions = {
        "maxPriorityFeePerGas": suggest_mean_gas_tip_cap(cfg.node_url, batch, timeout),
        "maxFeePerGas": suggest_mean_gas_fee_cap(block["baseFeePerGas"], batch),
        "gasPrice": suggest_mean_gas_price(send(eth_gasPrice(), cfg.node_url, timeout), batch),
    }
    print(json.dumps({ k: hex(v) for k, v in suggestions.items() }, indent=2))
    return 0

def main(argv=None):
    parser = make_parser()
    args = parser.parse_args(argv)
    cfg = get_config()

    try:
        if args.command == 'show':
            return show(cfg)
        elif args.command == 'check':
            return check(cfg, args.timeout)
        elif args.command == 'gas':
            return suggest_gas(cfg, args.file, args.timeout)
    except (RPCError, KeyError, ValueError) as err:
        fatal(type(err).__name__ + ": " + str(err))

    parser.print_help()
    return 2

if __name__ == '__main__':
    raise SystemExit(main())
