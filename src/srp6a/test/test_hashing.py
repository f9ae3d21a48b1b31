import unittest, hashlib
from binascii import hexlify
from srp6a import hashing
from srp6a.errors import UnsupportedAlgorithm, SRPError

class Pipeline(unittest.TestCase):
    def test_concatenates_in_order(self):
        h = hashing.hash_items(hashing.SHA256, [b"ab", "c", b"", "d"])
        self.assertEqual(h, hashlib.sha256(b"abcd").digest())
        h2 = hashing.hash_items(hashing.SHA256, ["d", b"ab", "c"])
        self.assertNotEqual(h, h2)

    def test_empty(self):
        self.assertEqual(hexlify(hashing.hash_items(hashing.SHA256, [])),
                         b"e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855")

    def test_text_is_utf8(self):
        h = hashing.hash_items(hashing.SHA512, ["café"])
        self.assertEqual(h, hashlib.sha512(b"caf\xc3\xa9").digest())

    def test_known_vector(self):
        self.assertEqual(hexlify(hashing.hash_items(hashing.SHA256, ["ab", "c"])),
                         b"ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad")

    def test_all_algorithms(self):
        expected = {"SHA-256": hashlib.sha256, "SHA-384": hashlib.sha384,
                    "SHA-512": hashlib.sha512, "SHA3-256": hashlib.sha3_256,
                    "SHA3-384": hashlib.sha3_384,
                    "SHA3-512": hashlib.sha3_512}
        self.assertEqual(set(hashing.ALGORITHMS), set(expected))
        for name, hasher in expected.items():
            h = hashing.hash_items(name, [b"x", ":", b"y"])
            self.assertEqual(h, hasher(b"x:y").digest(), name)
            self.assertEqual(hashing.digest_size(name), hasher().digest_size)
            self.assertIs(hashing.get_hash_function(name), hasher)

    def test_bad_item(self):
        self.assertRaises(TypeError, hashing.hash_items, hashing.SHA256, [1])
        self.assertRaises(TypeError, hashing.hash_items, hashing.SHA256,
                          [b"a", None])

    def test_unsupported(self):
        for bad in ["MD5", "sha256", "SHA-1", "", None]:
            self.assertRaises(UnsupportedAlgorithm,
                              hashing.hash_items, bad, [b"a"])
        self.assertTrue(issubclass(UnsupportedAlgorithm, SRPError))

if __name__ == '__main__':
    unittest.main()
