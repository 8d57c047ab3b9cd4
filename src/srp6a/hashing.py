from hashlib import sha256

class Hasher:
    """H(): a digest over the concatenation of its arguments.

    Every participant of an exchange must use the same hash function. It is
    fixed when the GroupParameters are built and never negotiated.
    """
    def __init__(self, hashfunc=sha256):
        self.hashfunc = hashfunc
        h = hashfunc()
        self.name = h.name
        self.digest_size = h.digest_size

    def digest(self, *pieces):
        h = self.hashfunc()
        for piece in pieces:
            assert isinstance(piece, bytes), repr(piece)
            h.update(piece)
        return h.digest()

    def xor_digests(self, d1, d2):
        assert len(d1) == len(d2) == self.digest_size
        return bytes(b1 ^ b2 for (b1, b2) in zip(d1, d2))
