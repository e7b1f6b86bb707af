#!/usr/bin/python3
from .config import DEFAULT_TIMEOUT
from .rpc import RPCError, send, eth_chainId, eth_supportedEntryPoints, eth_getCode
from .utils import *

class PreflightReport:
    def __init__(self):
        self.passed = []
        self.failed = []
        self.warnings = []

    @property
    def ok(self):
        return len(self.failed) == 0

def check_passed(report, name, detail=""):
    report.passed.append(name)
    notif("PASS " + name + ((": " + detail) if detail else ""), colors.fg.green)

def check_failed(report, name, detail):
    report.failed.append(name)
    notif("FAIL " + name + ": " + detail, colors.fg.red)

def check_warning(report, name, detail):
    report.warnings.append(name)
    notif("WARN " + name + ": " + detail, colors.fg.orange)

def check_formats(report, cfg):
    '''Reports malformed addresses and keys. Values are never corrected here.'''
    for field in ["test_erc20_token", "test_gas"]:
        value = getattr(cfg, field)
        if not is_hex_address(value):
            check_failed(report, field + " format", repr(value) + " is not 0x followed by 40 hex characters")
        elif not is_checksum_address(value):
            check_warning(report, field + " checksum", value + " does not match its EIP-55 checksum " + to_checksum_address(value))
    if not is_hex_key(cfg.signing_key):
        check_warning(report, "signing_key format", "expected 64 hex characters, got " + str(len(strip_hex_prefix(cfg.signing_key))))

def check_node(report, cfg, timeout):
    try:
        result = send(eth_chainId(), cfg.node_url, timeout)
    except RPCError as err:
        check_failed(report, "node", cfg.node_url + ": " + str(err))
        return False
    if not isinstance(result, str) or not is_hex(strip_hex_prefix(result)):
        check_failed(report, "node", cfg.node_url + " returned an invalid chain id " + repr(result))
        return False
    chain_id = hex_to_int(result)
    check_passed(report, "node", cfg.node_url + " chain id " + str(chain_id))
    return True

def check_bundler(report, cfg, timeout):
    try:
        entry_points = send(eth_supportedEntryPoints(), cfg.bundler_url, timeout)
    except RPCError as err:
        check_failed(report, "bundler", cfg.bundler_url + ": " + str(err))
        return
    if not isinstance(entry_points, list) or not all(isinstance(e, str) for e in entry_points):
        check_failed(report, "bundler", cfg.bundler_url + " returned invalid entry points " + repr(entry_points))
    elif not entry_points:
        check_failed(report, "bundler", cfg.bundler_url + " reports no supported entry points")
    else:
        check_passed(report, "bundler", cfg.bundler_url + " entry points " + ", ".join(entry_points))

def check_contract(report, cfg, field, timeout):
    address = getattr(cfg, field)
    try:
        code = send(eth_getCode(address, "latest"), cfg.node_url, timeout)
    except RPCError as err:
        check_failed(report, field, str(err))
        return
    if not isinstance(code, str):
        check_failed(report, field, "invalid code returned for " + address + ": " + repr(code))
    elif strip_hex_prefix(code) == "":
        check_failed(report, field, "no code deployed at " + address)
    else:
        check_passed(report, field, address)

def run_preflight(cfg, timeout=DEFAULT_TIMEOUT):
    '''- Checks the static test configuration against the running environment
       - Node and bundler must answer, and both test contracts must be deployed on the node
       - Returns a PreflightReport; console output is a side effect of each check
    '''
    report = PreflightReport()
    check_formats(report, cfg)
    node_up = check_node(report, cfg, timeout)
    check_bundler(report, cfg, timeout)
    if node_up:
        for field in ["test_erc20_token", "test_gas"]:
            if is_hex_address(getattr(cfg, field)):
                check_contract(report, cfg, field, timeout)
    notif("Passing checks: " + str(len(report.passed)))
    notif("Failing checks: " + str(len(report.failed)))
    return report
