import os
import unittest
from unittest import mock

import basen
from basen import ENCODING, BASE62, BASE58, Encoding, current_encoding, get_encoding
from basen.error import UnknownEncodingError, AlphabetError


class TestConfig(unittest.TestCase):

    def test_default_is_base62(self):
        with mock.patch.dict(os.environ, clear=True):
            self.assertEqual(current_encoding(), ENCODING.BASE62)
            self.assertIs(get_encoding(), BASE62)
            self.assertEqual(basen.encode(bytes([62])), '10')
            self.assertEqual(basen.decode('10'), bytes([62]))

    def test_select_base58(self):
        with mock.patch.dict(os.environ, {'BASEN_ENCODING': 'base58'}, clear=True):
            self.assertEqual(current_encoding(), ENCODING.BASE58)
            self.assertIs(get_encoding(), BASE58)
            self.assertEqual(basen.encode(b'hello world'), 'StV1DL6CwTryKyV')

    def test_unknown_encoding(self):
        with mock.patch.dict(os.environ, {'BASEN_ENCODING': 'base64'}, clear=True):
            with self.assertRaises(UnknownEncodingError):
                current_encoding()
        with self.assertRaises(UnknownEncodingError):
            get_encoding('base64')

    def test_unknown_encoding_message(self):
        with mock.patch.dict(os.environ, {'BASEN_ENCODING': 'base64'}, clear=True):
            with self.assertRaises(ValueError) as cm:
                current_encoding()
        self.assertTrue(str(cm.exception).startswith("Unknown encoding 'base64'"))

    def test_by_name(self):
        self.assertIs(get_encoding('base58'), BASE58)
        self.assertIs(get_encoding('BASE62'), BASE62)
        self.assertIs(get_encoding(ENCODING.BASE58), BASE58)

    def test_custom_alphabet(self):
        with mock.patch.dict(os.environ, {'BASEN_ALPHABET': '01', 'BASEN_ENCODING': 'base58'}, clear=True):
            self.assertEqual(get_encoding(), Encoding('01'))
            self.assertEqual(basen.encode(b'\x05'), '101')
            self.assertEqual(basen.random(1, lambda n: b'\x02'), '10')

    def test_invalid_custom_alphabet(self):
        with mock.patch.dict(os.environ, {'BASEN_ALPHABET': 'aab'}, clear=True):
            with self.assertRaises(AlphabetError):
                basen.decode('a')


if __name__ == '__main__':
    unittest.main()
