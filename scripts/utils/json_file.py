import json
import os


def _default(value):
    # hex-encode raw bytes (constructor args, bytecode hashes)
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    return str(value)


def load(filename):
    # loads the json content of a file
    # (error will be raised if file doesn't exist)

    with open(filename) as file:
        return json.load(file)


def load_or_empty(filename):
    if not os.path.exists(filename):
        return {}
    return load(filename)


def save(filename, content=None):
    # saves the json content to a file

    content = {} if content is None else content
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(filename, "w") as outfile:
        json.dump(
            content,
            outfile,
            indent=2,
            default=_default,
        )

    return filename
