import os
from .util import to_utf8, bytes_to_number

# registration-time material:
#  s = random salt
#  x = H(s | H(I | ":" | p))      (never stored, never sent)
#  v = g^x                        (stored by the server in place of p)

SALT_BYTES = 32

def generate_salt(entropy_f=os.urandom, num_bytes=SALT_BYTES):
    salt = entropy_f(num_bytes)
    assert isinstance(salt, bytes)
    assert len(salt) == num_bytes
    return salt

def derive_private_key(params, salt, identity, password):
    """Return x as an integer. This is a pure function of its inputs, so a
    client can re-derive it at login time instead of storing it."""
    assert isinstance(salt, bytes)
    H = params.hasher
    inner = H.digest(to_utf8(identity) + b":" + to_utf8(password))
    x_bytes = H.digest(salt, inner)
    return bytes_to_number(x_bytes) % params.N

def derive_verifier(params, x):
    return pow(params.g, x, params.N)
