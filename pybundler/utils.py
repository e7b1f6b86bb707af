#!/usr/bin/python3
import sys
import string
from Crypto.Hash import keccak

class colors:
    reset = '\033[0m'

    class fg:
        red = '\033[31m'
        green = '\033[32m'
        orange = '\033[33m'
        cyan = '\033[36m'

def notif(msg, color=colors.reset):
    sys.stderr.write(color + "== " + msg + '\n' + colors.reset)
    sys.stderr.flush()

def fatal(msg, code=1):
    notif(msg, colors.fg.red)
    sys.exit(code)

def strip_hex_prefix(value):
    if value.startswith("0x") or value.startswith("0X"):
        return value[2:]
    return value

def add_hex_prefix(value):
    return "0x" + strip_hex_prefix(value)

def is_hex(value):
    return len(value) > 0 and all(c in string.hexdigits for c in value)

def is_hex_address(value):
    '''True for `0x` followed by exactly 40 hex characters, regardless of case'''
    return value.startswith("0x") and len(value) == 42 and is_hex(value[2:])

def is_hex_key(value):
    '''True for a 32 byte private key: 64 hex characters, `0x` prefix optional'''
    key = strip_hex_prefix(value)
    return len(key) == 64 and is_hex(key)

def keccak256(data):
    digest = keccak.new(digest_bits=256)
    digest.update(data)
    return digest.hexdigest()

def to_checksum_address(value):
    '''EIP-55: upper-cases each letter whose nibble in keccak(lowercase address) is >= 8'''
    if not is_hex_address(value):
        raise ValueError("Not a hex address: " + repr(value))
    address = value[2:].lower()
    address_hash = keccak256(address.encode("ascii"))
    return "0x" + "".join(c.upper() if int(h, 16) >= 8 else c for c, h in zip(address, address_hash))

def is_checksum_address(value):
    return is_hex_address(value) and to_checksum_address(value) == value

def hex_to_int(value):
    '''Accepts an int or a `0x` hex quantity as returned by the node'''
    if isinstance(value, int):
        return value
    return int(strip_hex_prefix(value), 16)
