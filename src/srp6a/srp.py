import os, logging
from collections import namedtuple
from .params import GroupParameters, DefaultParams
from .errors import MalformedValue
from .util import (hex_to_number, number_to_hex, number_to_minimal_bytes,
                   bytes_to_number, pad)
from . import identity, ephemeral, session, keys

logger = logging.getLogger(__name__)

# Every value that crosses the wire (salt, verifier, A, B, M1, M2, K) is a
# lowercase hex string. Secrets (a, b, x) use the same encoding so that the
# caller can hold on to them between round trips, but they must never be
# sent anywhere.
#
#   client                                   server
#   ------                                   ------
#   registration:
#   s = generate_salt()
#   x = derive_private_key(s, I, p)
#   v = derive_verifier(x)       -- I,s,v -->  store
#
#   login:
#   a,A = generate_ephemeral()   -- I,A ---->  look up s,v
#                                <--- s,B ---  b,B = generate_ephemeral(v)
#   x = derive_private_key(s, I, p)
#   K,M1 = derive_session(a, B, s, I, x)
#                                ---- M1 --->  K,M2 = derive_session(b, A, s, I, v, M1)
#   verify_session(A, (K,M1), M2) <--- M2 ---
#
# Neither façade remembers anything between calls: all per-attempt state is
# in the values handed back to the caller, so one instance can serve many
# concurrent attempts.

Ephemeral = namedtuple("Ephemeral", ["secret", "public"])
Session = namedtuple("Session", ["key", "proof"])

class _SRPBase:
    "Registration-time operations, shared by both roles."

    def __init__(self, params=DefaultParams, entropy_f=os.urandom):
        assert isinstance(params, GroupParameters), repr(params)
        self.params = params
        self.entropy_f = entropy_f

    def generate_salt(self):
        salt = identity.generate_salt(self.entropy_f)
        return number_to_hex(bytes_to_number(salt))

    def derive_private_key(self, salt, username, password):
        x = identity.derive_private_key(self.params, self._salt_bytes(salt),
                                        username, password)
        return number_to_hex(x)

    def derive_verifier(self, private_key):
        v = identity.derive_verifier(self.params, hex_to_number(private_key))
        return number_to_hex(v)

    def expand_key(self, session_key, info=b"", length=32):
        return keys.expand_session_key(self.params, session_key, info, length)

    def _salt_bytes(self, salt):
        return number_to_minimal_bytes(hex_to_number(salt))

    def _digest_bytes(self, value, what):
        size = self.params.hasher.digest_size
        number = hex_to_number(value)
        try:
            return pad(number, size)
        except ValueError:
            raise MalformedValue("%s is larger than a %s digest"
                                 % (what, self.params.hasher.name))


class SRPClient(_SRPBase):
    def generate_ephemeral(self):
        a, A = ephemeral.client_generate(self.params, self.entropy_f)
        logger.debug("client ephemeral generated (%d-bit group)",
                     self.params.bits)
        return Ephemeral(secret=number_to_hex(a), public=number_to_hex(A))

    def derive_session(self, client_secret_ephemeral, server_public_ephemeral,
                       salt, username, private_key,
                       client_public_ephemeral=None):
        a = hex_to_number(client_secret_ephemeral)
        B = hex_to_number(server_public_ephemeral)
        x = hex_to_number(private_key)
        A = None
        if client_public_ephemeral is not None:
            A = hex_to_number(client_public_ephemeral)
        K, M1 = session.derive_client_session(self.params, a, B,
                                              self._salt_bytes(salt),
                                              username, x, A=A)
        return Session(key=number_to_hex(bytes_to_number(K)),
                       proof=number_to_hex(bytes_to_number(M1)))

    def verify_session(self, client_public_ephemeral, client_session,
                       server_session_proof):
        A = hex_to_number(client_public_ephemeral)
        M1 = self._digest_bytes(client_session.proof, "client proof")
        K = self._digest_bytes(client_session.key, "session key")
        M2 = hex_to_number(server_session_proof)
        session.verify_server_proof(self.params, A, M1, K, M2)


class SRPServer(_SRPBase):
    def generate_ephemeral(self, verifier):
        v = hex_to_number(verifier)
        b, B = ephemeral.server_generate(self.params, v, self.entropy_f)
        logger.debug("server ephemeral generated (%d-bit group)",
                     self.params.bits)
        return Ephemeral(secret=number_to_hex(b), public=number_to_hex(B))

    def derive_session(self, server_secret_ephemeral, client_public_ephemeral,
                       salt, username, verifier, client_session_proof):
        b = hex_to_number(server_secret_ephemeral)
        A = hex_to_number(client_public_ephemeral)
        v = hex_to_number(verifier)
        M1 = hex_to_number(client_session_proof)
        K, M2 = session.derive_server_session(self.params, b, A,
                                              self._salt_bytes(salt),
                                              username, v, M1)
        return Session(key=number_to_hex(bytes_to_number(K)),
                       proof=number_to_hex(bytes_to_number(M2)))


# The module-level functions below use the default (2048-bit, SHA-256) group.

def generate_salt():
    return SRPClient().generate_salt()

def derive_private_key(salt, username, password):
    return SRPClient().derive_private_key(salt, username, password)

def derive_verifier(private_key):
    return SRPClient().derive_verifier(private_key)

def generate_client_ephemeral():
    return SRPClient().generate_ephemeral()

def derive_client_session(client_secret_ephemeral, server_public_ephemeral,
                          salt, username, private_key,
                          client_public_ephemeral=None):
    return SRPClient().derive_session(client_secret_ephemeral,
                                      server_public_ephemeral, salt, username,
                                      private_key, client_public_ephemeral)

def verify_session(client_public_ephemeral, client_session,
                   server_session_proof):
    return SRPClient().verify_session(client_public_ephemeral, client_session,
                                      server_session_proof)

def generate_server_ephemeral(verifier):
    return SRPServer().generate_ephemeral(verifier)

def derive_server_session(server_secret_ephemeral, client_public_ephemeral,
                          salt, username, verifier, client_session_proof):
    return SRPServer().derive_session(server_secret_ephemeral,
                                      client_public_ephemeral, salt, username,
                                      verifier, client_session_proof)
