import unittest

from basen.transformations import bytes_to_int, int_to_bytes


class TestTransformations(unittest.TestCase):

    def test_int_to_bytes_is_minimal(self):
        self.assertEqual(int_to_bytes(0), b'')
        self.assertEqual(int_to_bytes(255), b'\xff')
        self.assertEqual(int_to_bytes(256), b'\x01\x00')

    def test_big_endian(self):
        self.assertEqual(bytes_to_int(b'\x01\x00'), 256)
        self.assertEqual(bytes_to_int(b''), 0)
        self.assertEqual(bytes_to_int(b'\x00\x00\x2a'), 42)


if __name__ == '__main__':
    unittest.main()
