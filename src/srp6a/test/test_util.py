import unittest
from srp6a import util
from srp6a.errors import InvalidInput
from .common import PRG, zeros

class Sizes(unittest.TestCase):
    def test_binsize(self):
        def sizebb(maxval):
            num_bits = util.size_bits(maxval)
            num_bytes = util.size_bytes(maxval)
            return (num_bytes, num_bits)
        self.assertEqual(sizebb(0x00), (1, 1))
        self.assertEqual(sizebb(0x0f), (1, 4))
        self.assertEqual(sizebb(0x1f), (1, 5))
        self.assertEqual(sizebb(0x10), (1, 5))
        self.assertEqual(sizebb(0xff), (1, 8))
        self.assertEqual(sizebb(0x100), (2, 9))
        self.assertEqual(sizebb(0x1ff), (2, 9))
        self.assertEqual(sizebb(2**255-19), (32, 255))

class Codec(unittest.TestCase):
    def test_number_to_bytes(self):
        n2b = util.number_to_bytes
        self.assertEqual(n2b(0x00), b"\x00")
        self.assertEqual(n2b(0x01), b"\x01")
        self.assertEqual(n2b(0xff), b"\xff")
        self.assertEqual(n2b(0x100), b"\x01\x00")
        self.assertEqual(n2b(0x1ff), b"\x01\xff")
        self.assertEqual(n2b(0xffff), b"\xff\xff")
        self.assertEqual(n2b(0x10000), b"\x01\x00\x00")
        self.assertEqual(n2b(0xabc), b"\x0a\xbc")
        self.assertRaises(ValueError, n2b, -1)

    def test_bytes_to_number(self):
        b2n = util.bytes_to_number
        self.assertEqual(b2n(b""), 0)
        self.assertEqual(b2n(b"\x00"), 0x00)
        self.assertEqual(b2n(b"\x01"), 0x01)
        self.assertEqual(b2n(b"\xff"), 0xff)
        self.assertEqual(b2n(b"\x01\x00"), 0x0100)
        self.assertEqual(b2n(b"\x01\xff"), 0x01ff)
        self.assertEqual(b2n(b"\x00\x00\x00\x01"), 0x01)
        self.assertEqual(b2n(bytearray(b"\x02\x00")), 0x0200)
        self.assertRaises(TypeError, b2n, 42)
        self.assertRaises(TypeError, b2n, "not bytes")

    def test_roundtrip(self):
        fr = PRG(b"roundtrip")
        for length in [1, 2, 31, 32, 33, 128, 257]:
            b = b"\x01" + fr(length)
            self.assertEqual(util.number_to_bytes(util.bytes_to_number(b)), b)
        for n in [0, 1, 255, 256, 2**64, 2**1024 - 1]:
            self.assertEqual(util.bytes_to_number(util.number_to_bytes(n)), n)

    def test_leading_zeros_are_dropped(self):
        n = util.bytes_to_number(b"\x00\x00\x12\x34")
        self.assertEqual(util.number_to_bytes(n), b"\x12\x34")

class PowMod(unittest.TestCase):
    def test_values(self):
        self.assertEqual(util.pow_mod(2, 10, 1000), 24)
        self.assertEqual(util.pow_mod(3, 0, 7), 1)
        self.assertEqual(util.pow_mod(3, 0, 1), 0)
        self.assertEqual(util.pow_mod(0, 5, 7), 0)
        self.assertEqual(util.pow_mod(5, 117, 19), pow(5, 117, 19))

    def test_negative_base(self):
        # (-2)^3 = -8 = 15 (mod 23)
        self.assertEqual(util.pow_mod(-2, 3, 23), 15)
        self.assertEqual(util.pow_mod(-25, 1, 23), 21)

    def test_bad_modulus(self):
        self.assertRaises(ValueError, util.pow_mod, 2, 3, 0)
        self.assertRaises(ValueError, util.pow_mod, 2, 3, -7)
        self.assertRaises(ValueError, util.pow_mod, 2, -1, 7)

class Compare(unittest.TestCase):
    def test_constant_length_equal(self):
        cle = util.constant_length_equal
        self.assertTrue(cle(b"", b""))
        self.assertTrue(cle(b"abc", b"abc"))
        self.assertTrue(cle(bytearray(b"abc"), b"abc"))
        self.assertFalse(cle(b"abc", b"abd"))
        self.assertFalse(cle(b"abc", b"ab"))
        self.assertFalse(cle(b"ab", b"abc"))
        self.assertFalse(cle(b"\x00" * 32, b"\x00" * 31 + b"\x01"))

    def test_xor(self):
        self.assertEqual(util.xor_bytes(b"\x0f\xf0", b"\xff\xff"), b"\xf0\x0f")
        self.assertEqual(util.xor_bytes(b"", b""), b"")
        self.assertRaises(ValueError, util.xor_bytes, b"\x00", b"\x00\x00")

class Hex(unittest.TestCase):
    def test_to_hex(self):
        self.assertEqual(util.to_hex(b"\x00\xab\xcd"), "00abcd")
        self.assertEqual(util.to_hex(b""), "")

    def test_decode(self):
        self.assertEqual(util.decode(b"\x00\x01"), b"\x00\x01")
        self.assertEqual(util.decode(bytearray(b"\x02")), b"\x02")
        self.assertEqual(util.decode("00abcd"), b"\x00\xab\xcd")
        self.assertEqual(util.decode("00ABCD"), b"\x00\xab\xcd")
        self.assertEqual(util.decode("0x0102"), b"\x01\x02")
        self.assertEqual(util.decode("abc"), b"\x0a\xbc")
        self.assertEqual(util.decode(""), b"")

    def test_decode_errors(self):
        self.assertRaises(InvalidInput, util.decode, "xyz1")
        self.assertRaises(InvalidInput, util.decode, "éé")
        self.assertRaises(InvalidInput, util.decode, 1234)

class Entropy(unittest.TestCase):
    def test_random_bytes(self):
        self.assertEqual(len(util.random_bytes(192)), 24)
        self.assertEqual(len(util.random_bytes(1)), 1)
        self.assertEqual(len(util.random_bytes(9)), 2)
        self.assertEqual(util.random_bytes(256, entropy_f=PRG(b"x")),
                         PRG(b"x")(32))
        self.assertRaises(ValueError, util.random_bytes, 0)

    def test_short_read(self):
        self.assertRaises(ValueError, util.random_bytes, 64,
                          entropy_f=lambda n: b"\x01")

    def test_random_number(self):
        for seed in range(200):
            fr = PRG(str(seed).encode("ascii"))
            n = util.random_number(12, entropy_f=fr)
            self.assertTrue(0 <= n < 2**12, (n, seed))
        self.assertEqual(util.random_number(256, entropy_f=zeros), 0)
        self.assertEqual(util.random_number(4, entropy_f=lambda n: b"\xff"),
                         0x0f)

if __name__ == '__main__':
    unittest.main()
