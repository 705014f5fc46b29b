"""Helper Functions to convert between bytes and integers"""


def bytes_to_int(bts):
    return int.from_bytes(bts, 'big')


def int_to_bytes(i):
    """Minimal big-endian representation, zero maps to b''"""
    return i.to_bytes((i.bit_length() + 7) // 8, 'big')


def hex_to_bytes(h):
    return bytes.fromhex(h)

