import os
from .errors import InvalidEphemeral
from .util import unbiased_randrange

# a = random(1, N)
# A = g^a
#  b = random(1, N)
#  B = k*v + g^b
# Whoever receives A or B must check that it is not 0 mod N before using it.

def random_secret(params, entropy_f=os.urandom):
    return unbiased_randrange(1, params.N, entropy_f)

def client_generate(params, entropy_f=os.urandom):
    a = random_secret(params, entropy_f)
    A = pow(params.g, a, params.N)
    return a, A

def server_public(params, b, v):
    N = params.N
    return (params.k * v + pow(params.g, b, N)) % N

def server_generate(params, v, entropy_f=os.urandom):
    b = random_secret(params, entropy_f)
    return b, server_public(params, b, v)

def validate_peer_public(params, value, name="public ephemeral"):
    """Return the peer's value reduced mod N, or raise InvalidEphemeral if
    that is zero."""
    # an attacker who sends 0 (or any multiple of N) pins S to 0 on our side
    reduced = value % params.N
    if reduced == 0:
        raise InvalidEphemeral("SRP-6a safety check failed: %s is zero mod N"
                               % name)
    return reduced
