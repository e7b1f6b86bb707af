#!/usr/bin/python3
from subprocess import Popen, PIPE
import json
from .config import DEFAULT_TIMEOUT
## RPC Call helpers

class RPCError(Exception):
    pass

def send_rpc(rpc, url, timeout=DEFAULT_TIMEOUT):
    process = Popen(['curl', '--silent', '--max-time', str(timeout), '-H', 'Content-Type: application/json', '--data', rpc, url], stdout=PIPE, stderr=PIPE)
    stdout, stderr = process.communicate()
    if process.returncode != 0:
        raise RPCError("curl exited with code " + str(process.returncode) + " for " + url)
    return stdout

def get_result(response):
    '''Parses the response of an rpc method and retrieves the contents of the `result` field.'''
    try:
        body = json.loads(response.decode("utf8"))
    except ValueError:
        raise RPCError("Could not decode response: " + repr(response))
    if not isinstance(body, dict):
        raise RPCError("Response is not a JSON-RPC object: " + repr(response))
    if "error" in body:
        error = body["error"]
        if isinstance(error, dict):
            raise RPCError(str(error.get("message", "unknown error")))
        raise RPCError(str(error))
    if "result" not in body:
        raise RPCError("Response has no result: " + repr(response))
    return body["result"]

def send(rpc, url, timeout=DEFAULT_TIMEOUT):
    '''Sends an rpc method call to `url` and returns the parsed response.'''
    return get_result(send_rpc(rpc, url, timeout))

def rpc_call(method, params=None):
    rpcobj = { "jsonrpc": "2.0", "id": 1, "method": method, "params": params if params is not None else [] }
    return json.dumps(rpcobj)

# Node

def eth_chainId():
    return rpc_call("eth_chainId")

def eth_blockNumber():
    return rpc_call("eth_blockNumber")

def eth_gasPrice():
    return rpc_call("eth_gasPrice")

def eth_maxPriorityFeePerGas():
    return rpc_call("eth_maxPriorityFeePerGas")

def eth_getBlockByNumber(tag, full_transactions=False):
    return rpc_call("eth_getBlockByNumber", params=[ tag, full_transactions ])

def eth_getCode(address, tag):
    return rpc_call("eth_getCode", params=[ address, tag ])

# Bundler

def eth_supportedEntryPoints():
    return rpc_call("eth_supportedEntryPoints")

def eth_sendUserOperation(user_op, entry_point):
    return rpc_call("eth_sendUserOperation", params=[ user_op, entry_point ])

def eth_estimateUserOperationGas(user_op, entry_point):
    return rpc_call("eth_estimateUserOperationGas", params=[ user_op, entry_point ])

def eth_getUserOperationReceipt(user_op_hash):
    return rpc_call("eth_getUserOperationReceipt", params=[ user_op_hash ])
