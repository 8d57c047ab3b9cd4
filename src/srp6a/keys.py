from hkdf import Hkdf
from .util import hex_to_number, pad
from .errors import MalformedValue

def expand_session_key(params, key, info=b"", length=32):
    """Derive an application key from the SRP session key K.

    K is accepted either as raw bytes (exactly one digest long) or as a str
    in its hex wire form. Use a different info= for each purpose (e.g. one
    per direction of an encrypted channel) so that the subkeys are
    independent of each other.
    """
    digest_size = params.hasher.digest_size
    if isinstance(key, bytes):
        if len(key) != digest_size:
            raise MalformedValue("raw session key must be %d bytes"
                                 % digest_size)
        key_bytes = key
    else:
        key_number = hex_to_number(key)
        try:
            key_bytes = pad(key_number, digest_size)
        except ValueError:
            raise MalformedValue("session key does not fit the %s digest"
                                 % params.hasher.name)
    assert isinstance(info, bytes)
    h = Hkdf(salt=b"", input_key_material=key_bytes,
             hash=params.hasher.hashfunc)
    return h.expand(info, length)
