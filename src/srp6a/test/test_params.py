import unittest
from hashlib import sha1, sha256, sha512
from srp6a import params
from srp6a.params import for_bit_size, ALL_BIT_SIZES
from srp6a.errors import InvalidGroup
from srp6a.util import bytes_to_number
from .common import ALL_PARAMS

class Groups(unittest.TestCase):
    def test_sizes(self):
        self.assertEqual(ALL_BIT_SIZES, [1024, 1536, 2048, 3072, 4096])
        for p in ALL_PARAMS:
            self.assertEqual(p.N.bit_length(), p.bits)
            self.assertEqual(p.element_size_bytes, p.bits // 8)
            self.assertEqual(len(p.pad(p.g)), p.bits // 8)
            # cheap sanity check on the constants: Fermat, for N and q
            self.assertEqual(pow(p.g, p.N - 1, p.N), 1)
            self.assertEqual(pow(3, (p.N - 1) // 2 - 1, (p.N - 1) // 2), 1)

    def test_generators(self):
        self.assertEqual([p.g for p in ALL_PARAMS], [2, 2, 2, 5, 5])

    def test_for_bit_size(self):
        for bits, p in zip(ALL_BIT_SIZES, ALL_PARAMS):
            self.assertIs(for_bit_size(bits), p)
        self.assertIs(params.DefaultParams, params.Params2048)
        for bad in [0, 512, 1023, 2047, 8192, -2048, "2048", None]:
            self.assertRaises(InvalidGroup, for_bit_size, bad)

    def test_other_hash(self):
        p = for_bit_size(2048, hashfunc=sha512)
        self.assertIsNot(p, params.Params2048)
        self.assertEqual(p.N, params.Params2048.N)
        self.assertEqual(p.hasher.digest_size, 64)
        self.assertNotEqual(p.k, params.Params2048.k)
        self.assertEqual(params.Params2048.hasher.name, "sha256")

    def test_k(self):
        for p in ALL_PARAMS:
            expected = sha256(p.pad(p.N) + p.pad(p.g)).digest()
            self.assertEqual(p.k, bytes_to_number(expected))
            # computed once, then cached
            self.assertIs(p.k, p.k)

    def test_k_rfc5054(self):
        # RFC 5054 appendix B uses SHA-1 with the 1024-bit group
        p = for_bit_size(1024, hashfunc=sha1)
        self.assertEqual(p.k, 0x7556AA045AEF2CDD07ABAF0F665C3E818913186F)

    def test_h_N_xor_h_g(self):
        p = params.Params2048
        x = p.h_N_xor_h_g
        self.assertEqual(len(x), 32)
        h_N = sha256(p.pad(p.N)).digest()
        h_g = sha256(b"\x02").digest()
        self.assertEqual(x, bytes(a ^ b for (a, b) in zip(h_N, h_g)))
        self.assertIs(p.h_N_xor_h_g, x)

    def test_repr(self):
        self.assertEqual(repr(params.Params3072),
                         "<GroupParameters 3072-bit sha256>")

if __name__ == '__main__':
    unittest.main()
