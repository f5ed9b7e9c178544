import unittest

from steamid.exceptions import InvalidStateError, MalformedInputError
from steamid.formats import friendcode


class FriendCodeTest(unittest.TestCase):
    def test_encode(self):
        self.assertEqual(friendcode.encode(1), 'AJJJS-ABAA')
        self.assertEqual(friendcode.encode(1266042636), 'AEVDG-WQTQ')

    def test_encode_bounds(self):
        self.assertEqual(friendcode.encode(1), friendcode.MIN)
        self.assertEqual(friendcode.encode(0xFFFFFFFF), friendcode.MAX)

    def test_encode_out_of_range(self):
        for account_id in (0, -1, 0x100000000, None):
            with self.subTest(account_id=account_id):
                with self.assertRaises(MalformedInputError):
                    friendcode.encode(account_id)

    def test_decode(self):
        self.assertEqual(friendcode.decode('AJJJS-ABAA'), 1)
        self.assertEqual(friendcode.decode('AEVDG-WQTQ'), 1266042636)
        self.assertEqual(friendcode.decode('S9ZZR-999P'), 0xFFFFFFFF)
        # the top bit of the last symbol falls outside the 64-bit word
        self.assertEqual(friendcode.decode(' S9ZZR-9997 '), 0xFFFFFFFF)

    def test_decode_malformed(self):
        for code in ('', 'AJJJSABAA', 'AJJJ-SABAA', 'ajjjs-abaa', 'AJJJS-ABAA-', 'AAAA-AJJJS-ABAA',
                     'AJJJS-AB0A', 'AJJJS-ABIA', None):
            with self.subTest(code=code):
                with self.assertRaises(MalformedInputError):
                    friendcode.decode(code)

    def test_decode_zero(self):
        with self.assertRaises(InvalidStateError):
            friendcode.decode('AAAAA-AAAA')

    def test_hash_bits_are_not_checked(self):
        # hash bit of the highest nibble flipped
        self.assertEqual(friendcode.decode('AJJJS-ABCA'), 1)

    def test_pack(self):
        payload = friendcode.pack(0xFFFFFFFF)

        self.assertEqual(payload >> 40, 0)
        self.assertEqual(friendcode.unpack(payload), 0xFFFFFFFF)

    def test_unpack_ignores_hash_bits(self):
        self.assertEqual(friendcode.unpack(0b10 << 35), 1)
        self.assertEqual(friendcode.unpack((0b10 << 35) | 0b1000010000100001), 1)

    def test_round_trip_samples(self):
        for account_id in (1, 2, 0xF, 0x10, 22202, 1266042636, 0x80000000, 0xFFFFFFFE, 0xFFFFFFFF):
            with self.subTest(account_id=account_id):
                self.assertEqual(friendcode.decode(friendcode.encode(account_id)), account_id)


if __name__ == "__main__":
    unittest.main()
