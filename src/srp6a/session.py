import hmac, logging
from .errors import InvalidEphemeral, InvalidClientProof, InvalidServerProof
from .ephemeral import validate_peer_public, server_public
from .util import to_utf8, pad, bytes_to_number

logger = logging.getLogger(__name__)

# u = H(PAD(A) | PAD(B))
# client: S = (B - k*g^x) ^ (a + u*x)
# server: S = (A * v^u) ^ b
# K = H(PAD(S))
# M1 = H(H(N) xor H(g) | H(I) | s | PAD(A) | PAD(B) | K)
# M2 = H(PAD(A) | M1 | K)
#
# The client sends M1 first. The server checks it before it computes or
# releases M2, and the client checks M2 before it trusts K.

def compute_u(params, A, B):
    u_bytes = params.hasher.digest(params.pad(A), params.pad(B))
    u = bytes_to_number(u_bytes)
    if u == 0:
        raise InvalidEphemeral("SRP-6a safety check failed: u is zero")
    return u

def client_premaster_secret(params, a, B, x, u):
    N, g, k = params.N, params.g, params.k
    base = (B - k * pow(g, x, N)) % N
    return pow(base, a + u * x, N)

def server_premaster_secret(params, b, A, v, u):
    N = params.N
    return pow((A * pow(v, u, N)) % N, b, N)

def session_key(params, S):
    return params.hasher.digest(params.pad(S))

def client_proof(params, identity, salt, A, B, K):
    H = params.hasher
    return H.digest(params.h_N_xor_h_g,
                    H.digest(to_utf8(identity)),
                    salt,
                    params.pad(A),
                    params.pad(B),
                    K)

def server_proof(params, A, M1, K):
    return params.hasher.digest(params.pad(A), M1, K)

def _proofs_match(expected, received):
    # received is an integer, so the comparison ignores case and leading
    # zeros of the wire form. The bytes comparison is constant-time.
    try:
        received_bytes = pad(received, len(expected))
    except ValueError:
        return False
    return hmac.compare_digest(expected, received_bytes)

def derive_client_session(params, a, B, salt, identity, x, A=None):
    """Client half: returns (K, M1) as bytes. M1 goes to the server; K must
    not be used until verify_server_proof() accepts the server's M2."""
    B = validate_peer_public(params, B, "server public ephemeral B")
    if A is None:
        A = pow(params.g, a, params.N)
    u = compute_u(params, A, B)
    S = client_premaster_secret(params, a, B, x, u)
    K = session_key(params, S)
    M1 = client_proof(params, identity, salt, A, B, K)
    logger.debug("derived client session (%d-bit group)", params.bits)
    return K, M1

def derive_server_session(params, b, A, salt, identity, v, received_M1):
    """Server half: checks the client's M1 (an integer) and only then
    returns (K, M2) as bytes."""
    A = validate_peer_public(params, A, "client public ephemeral A")
    B = server_public(params, b, v)
    u = compute_u(params, A, B)
    S = server_premaster_secret(params, b, A, v, u)
    K = session_key(params, S)
    expected_M1 = client_proof(params, identity, salt, A, B, K)
    if not _proofs_match(expected_M1, received_M1):
        logger.info("client proof rejected (%d-bit group)", params.bits)
        raise InvalidClientProof("Client's proof is invalid: the client does"
                                 " not know the password")
    M2 = server_proof(params, A, expected_M1, K)
    logger.debug("derived server session (%d-bit group)", params.bits)
    return K, M2

def verify_server_proof(params, A, M1, K, received_M2):
    expected_M2 = server_proof(params, A, M1, K)
    if not _proofs_match(expected_M2, received_M2):
        logger.info("server proof rejected (%d-bit group)", params.bits)
        raise InvalidServerProof("Server's proof is invalid: the server does"
                                 " not know our verifier")
