"""Throughput of encode/decode on 8KiB inputs, comparable to base64 benchmarks"""

import timeit

from basen import BASE58, BASE62

SIZE = 8192
NUMBER = 20


def bench(name, func, arg, size):
    seconds = timeit.timeit(lambda: func(arg), number=NUMBER) / NUMBER
    print(f"{name:<28} {seconds * 1e6:12.1f} us/op {size / seconds / 1e6:8.2f} MB/s")


if __name__ == '__main__':
    data = bytes(range(1, 256)) * (SIZE // 255) + bytes(range(1, SIZE % 255 + 1))
    for label, enc in (('Base58', BASE58), ('Base62', BASE62)):
        bench(f"{label}EncodeToString", enc.encode, data, len(data))
        encoded = enc.encode(data)
        bench(f"{label}DecodeString", enc.decode, encoded, len(encoded))
