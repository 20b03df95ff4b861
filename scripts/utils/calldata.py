from eth_abi import encode
from eth_utils import function_signature_to_4byte_selector


def _split_types(params):
    # split on top-level commas only, tuple types keep their inner commas
    types = []
    depth = 0
    current = ""
    for char in params:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if char == "," and depth == 0:
            types.append(current.strip())
            current = ""
        else:
            current += char
    if current.strip():
        types.append(current.strip())
    return types


def parse_signature(signature):
    """
    `newAgent(address)` -> ("newAgent", ["address"])
    """
    signature = signature.replace(" ", "")
    start = signature.find("(")
    if start <= 0 or not signature.endswith(")"):
        raise ValueError(f"invalid function signature `{signature}`")
    return signature[:start], _split_types(signature[start + 1:-1])


def function_selector(signature):
    name, types = parse_signature(signature)
    return function_signature_to_4byte_selector(f"{name}({','.join(types)})")


def simple_encode(signature, *args):
    _, types = parse_signature(signature)
    if len(types) != len(args):
        raise ValueError(f"`{signature}` takes {len(types)} args, got {len(args)}")
    return function_selector(signature) + encode(types, list(args))
