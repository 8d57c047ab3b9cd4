import os, re, math
from binascii import hexlify, unhexlify
from .errors import MalformedValue

def size_bits(maxval):
    return maxval.bit_length() or 1

def size_bytes(maxval):
    return int(math.ceil(size_bits(maxval) / 8))

def pad(num, width):
    """Big-endian encoding of num, left-filled with zeros to width bytes."""
    if num < 0:
        raise ValueError("cannot encode a negative number")
    if size_bytes(num) > width:
        raise ValueError("number does not fit in %d bytes" % width)
    s = unhexlify(("%0" + str(2*width) + "x") % num)
    assert len(s) == width
    return s

def number_to_bytes(num, maxval):
    if num > maxval:
        raise ValueError
    return pad(num, size_bytes(maxval))

def number_to_minimal_bytes(num):
    return pad(num, size_bytes(num))

def bytes_to_number(s):
    if not isinstance(s, bytes):
        raise TypeError
    if not s:
        return 0
    return int(hexlify(s), 16)

_HEX_RE = re.compile(r"^[0-9a-fA-F]+$")

def hex_to_number(s):
    """Parse a wire value. Case and leading zeros are ignored, whitespace
    around the value is stripped, and nothing else is tolerated."""
    if isinstance(s, bytes):
        try:
            s = s.decode("ascii")
        except UnicodeDecodeError:
            raise MalformedValue("hex value is not ascii")
    if not isinstance(s, str):
        raise MalformedValue("expected a hex string, got %r" % type(s))
    cleaned = s.strip()
    if not _HEX_RE.match(cleaned):
        raise MalformedValue("not a hex string: %r" % s[:20])
    return int(cleaned, 16)

def number_to_hex(num):
    # canonical wire form: lowercase, no prefix, no leading zeros
    return "%x" % num

def hex_equal(h1, h2):
    return hex_to_number(h1) == hex_to_number(h2)

def to_utf8(s):
    if isinstance(s, bytes):
        return s
    if not isinstance(s, str):
        raise TypeError("expected str or bytes, got %r" % type(s))
    return s.encode("utf-8")

def generate_mask(maxval):
    num_bytes = size_bytes(maxval)
    num_bits = size_bits(maxval)
    leftover_bits = num_bits % 8
    if leftover_bits:
        top_byte_mask_int = (0x1 << leftover_bits) - 1
    else:
        top_byte_mask_int = 0xff
    assert 0 <= top_byte_mask_int <= 0xff
    return (top_byte_mask_int, num_bytes)

def random_list_of_ints(count, entropy_f=os.urandom):
    # return a list of ints, each 0<=x<=255, for masking
    return list(entropy_f(count))
def mask_list_of_ints(top_byte_mask_int, list_of_ints):
    return [top_byte_mask_int & list_of_ints[0]] + list_of_ints[1:]
def list_of_ints_to_number(l):
    return bytes_to_number(bytes(l))

def unbiased_randrange(start, stop, entropy_f):
    """Return a random integer k such that start <= k < stop, uniformly
    distributed across that range, like random.randrange but
    cryptographically bound and unbiased.

    r(1,N) provides a secret ephemeral exponent for the group with modulus N.
    """

    # we generate a random binary string up to 7 bits larger than we really
    # need, mask that down to be the right number of bits, then compare
    # against the range and try again if it's wrong. This will take a random
    # number of tries, but on average less than two

    # first we get 0<=number<(stop-start)
    maxval = stop - start

    top_byte_mask_int, num_bytes = generate_mask(maxval)
    while True:
        enough_bytes = random_list_of_ints(num_bytes, entropy_f)
        assert len(enough_bytes) == num_bytes
        candidate_bytes = mask_list_of_ints(top_byte_mask_int, enough_bytes)
        candidate_int = list_of_ints_to_number(candidate_bytes)
        if candidate_int < maxval:
            return start + candidate_int
