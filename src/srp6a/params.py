from hashlib import sha256
from .errors import InvalidGroup
from .hashing import Hasher
from .util import size_bytes, pad, number_to_minimal_bytes, bytes_to_number

"""SRP-6a group parameters.

A group is a safe prime N (N = 2q+1, q prime) and a generator g. All
arithmetic is done modulo N. The multiplier k = H(N | PAD(g)) is what turns
SRP-6 into SRP-6a; it is derived from the group and the hash function, so it
is computed on first use and then cached on the instance.

Both sides of an exchange must use the same GroupParameters. A mismatch is
not detected directly: the two sides simply derive different keys, and the
exchange fails at the proof check.

    params = for_bit_size(2048)
    params.N, params.g, params.k
    b = params.pad(A)    # A as len(N) big-endian bytes
    H = params.hasher    # H.digest(b1, b2, ...)
"""

class GroupParameters:
    def __init__(self, bits, N, g, hashfunc=sha256):
        assert N % 2 == 1
        assert 1 < g < N
        self.bits = bits
        self.N = N
        self.g = g
        self.hasher = Hasher(hashfunc)
        self.element_size_bytes = size_bytes(N)
        self._k = None
        self._h_N_xor_h_g = None

    def __repr__(self):
        return "<GroupParameters %d-bit %s>" % (self.bits, self.hasher.name)

    def pad(self, num):
        return pad(num, self.element_size_bytes)

    @property
    def k(self):
        # k = H(N | PAD(g))
        if self._k is None:
            k_bytes = self.hasher.digest(self.pad(self.N), self.pad(self.g))
            self._k = bytes_to_number(k_bytes)
        return self._k

    @property
    def h_N_xor_h_g(self):
        # the leading term of M1, as bytes
        if self._h_N_xor_h_g is None:
            H = self.hasher
            h_N = H.digest(number_to_minimal_bytes(self.N))
            h_g = H.digest(number_to_minimal_bytes(self.g))
            self._h_N_xor_h_g = H.xor_digests(h_N, h_g)
        return self._h_N_xor_h_g

    def with_hash(self, hashfunc):
        return GroupParameters(self.bits, self.N, self.g, hashfunc=hashfunc)

# These are the groups from RFC 5054 appendix A. The 1024/1536/2048-bit
# groups use g=2, the larger MODP-derived ones use g=5.

# 1024-bit group
Params1024 = GroupParameters(
    bits=1024,
    N=0xEEAF0AB9ADB38DD69C33F80AFA8FC5E86072618775FF3C0B9EA2314C9C256576D674DF7496EA81D3383B4813D692C6E0E0D5D8E250B98BE48E495C1D6089DAD15DC7D7B46154D6B6CE8EF4AD69B15D4982559B297BCF1885C529F566660E57EC68EDBC3C05726CC02FD4CBF4976EAA9AFD5138FE8376435B9FC61D2FC0EB06E3,
    g=2,
    )

# 1536-bit group
Params1536 = GroupParameters(
    bits=1536,
    N=0x9DEF3CAFB939277AB1F12A8617A47BBBDBA51DF499AC4C80BEEEA9614B19CC4D5F4F5F556E27CBDE51C6A94BE4607A291558903BA0D0F84380B655BB9A22E8DCDF028A7CEC67F0D08134B1C8B97989149B609E0BE3BAB63D47548381DBC5B1FC764E3F4B53DD9DA1158BFD3E2B9C8CF56EDF019539349627DB2FD53D24B7C48665772E437D6C7F8CE442734AF7CCB7AE837C264AE3A9BEB87F8A2FE9B8B5292E5A021FFF5E91479E8CE7A28C2442C6F315180F93499A234DCF76E3FED135F9BB,
    g=2,
    )

# 2048-bit group
Params2048 = GroupParameters(
    bits=2048,
    N=0xAC6BDB41324A9A9BF166DE5E1389582FAF72B6651987EE07FC3192943DB56050A37329CBB4A099ED8193E0757767A13DD52312AB4B03310DCD7F48A9DA04FD50E8083969EDB767B0CF6095179A163AB3661A05FBD5FAAAE82918A9962F0B93B855F97993EC975EEAA80D740ADBF4FF747359D041D5C33EA71D281E446B14773BCA97B43A23FB801676BD207A436C6481F1D2B9078717461A5B9D32E688F87748544523B524B0D57D5EA77A2775D2ECFA032CFBDBF52FB3786160279004E57AE6AF874E7303CE53299CCC041C7BC308D82A5698F3A8D0C38271AE35F8E9DBFBB694B5C803D89F7AE435DE236D525F54759B65E372FCD68EF20FA7111F9E4AFF73,
    g=2,
    )

# 3072-bit group
Params3072 = GroupParameters(
    bits=3072,
    N=0xFFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74020BBEA63B139B22514A08798E3404DDEF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7EDEE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3DC2007CB8A163BF0598DA48361C55D39A69163FA8FD24CF5F83655D23DCA3AD961C62F356208552BB9ED529077096966D670C354E4ABC9804F1746C08CA18217C32905E462E36CE3BE39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9DE2BCBF6955817183995497CEA956AE515D2261898FA051015728E5A8AAAC42DAD33170D04507A33A85521ABDF1CBA64ECFB850458DBEF0A8AEA71575D060C7DB3970F85A6E1E4C7ABF5AE8CDB0933D71E8C94E04A25619DCEE3D2261AD2EE6BF12FFA06D98A0864D87602733EC86A64521F2B18177B200CBBE117577A615D6C770988C0BAD946E208E24FA074E5AB3143DB5BFCE0FD108E4B82D120A93AD2CAFFFFFFFFFFFFFFFF,
    g=5,
    )

# 4096-bit group
Params4096 = GroupParameters(
    bits=4096,
    N=0xFFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74020BBEA63B139B22514A08798E3404DDEF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7EDEE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3DC2007CB8A163BF0598DA48361C55D39A69163FA8FD24CF5F83655D23DCA3AD961C62F356208552BB9ED529077096966D670C354E4ABC9804F1746C08CA18217C32905E462E36CE3BE39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9DE2BCBF6955817183995497CEA956AE515D2261898FA051015728E5A8AAAC42DAD33170D04507A33A85521ABDF1CBA64ECFB850458DBEF0A8AEA71575D060C7DB3970F85A6E1E4C7ABF5AE8CDB0933D71E8C94E04A25619DCEE3D2261AD2EE6BF12FFA06D98A0864D87602733EC86A64521F2B18177B200CBBE117577A615D6C770988C0BAD946E208E24FA074E5AB3143DB5BFCE0FD108E4B82D120A92108011A723C12A787E6D788719A10BDBA5B2699C327186AF4E23C1A946834B6150BDA2583E9CA2AD44CE8DBBBC2DB04DE8EF92E8EFC141FBECAA6287C59474E6BC05D99B2964FA090C3A2233BA186515BE7ED1F612970CEE2D7AFB81BDD762170481CD0069127D5B05AA993B4EA988D8FDDC186FFB7DC90A6C08F4DF435C934063199FFFFFFFFFFFFFFFF,
    g=5,
    )

DefaultParams = Params2048

_BY_BIT_SIZE = {
    1024: Params1024,
    1536: Params1536,
    2048: Params2048,
    3072: Params3072,
    4096: Params4096,
    }
ALL_BIT_SIZES = sorted(_BY_BIT_SIZE)

def for_bit_size(bits, hashfunc=sha256):
    try:
        params = _BY_BIT_SIZE[bits]
    except (KeyError, TypeError):
        raise InvalidGroup("Invalid SRP group size: %r (expected one of %s)"
                           % (bits, ", ".join(map(str, ALL_BIT_SIZES))))
    if hashfunc is not sha256:
        # each hash function gets its own instance, so k is cached per hash
        params = params.with_hash(hashfunc)
    return params
