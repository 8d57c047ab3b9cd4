import unittest
from hashlib import sha256
from srp6a import session, ephemeral, identity
from srp6a.errors import InvalidEphemeral, InvalidClientProof, InvalidServerProof
from srp6a.params import Params1024, Params2048
from srp6a.util import bytes_to_number
from .common import PRG, ALL_PARAMS

def register(p, salt=b"salt", I="alice", pw="password"):
    x = identity.derive_private_key(p, salt, I, pw)
    return x, identity.derive_verifier(p, x)

class Premaster(unittest.TestCase):
    def test_formulas_agree(self):
        for p in [Params1024, Params2048]:
            x, v = register(p)
            a, A = ephemeral.client_generate(p, PRG(b"a"))
            b, B = ephemeral.server_generate(p, v, PRG(b"b"))
            u = session.compute_u(p, A, B)
            S_client = session.client_premaster_secret(p, a, B, x, u)
            S_server = session.server_premaster_secret(p, b, A, v, u)
            self.assertEqual(S_client, S_server)
            self.assertEqual(session.session_key(p, S_client),
                             sha256(p.pad(S_client)).digest())

    def test_u(self):
        p = Params1024
        u = session.compute_u(p, 3, 5)
        self.assertEqual(u, bytes_to_number(sha256(p.pad(3) + p.pad(5))
                                            .digest()))
        self.assertNotEqual(u, session.compute_u(p, 5, 3))

    def test_u_zero(self):
        class ZeroHasher:
            def digest(self, *pieces):
                return b"\x00" * 32
        class P:
            hasher = ZeroHasher()
            def pad(self, num):
                return Params1024.pad(num)
        self.assertRaises(InvalidEphemeral, session.compute_u, P(), 3, 5)

class Proofs(unittest.TestCase):
    def test_client_proof_layout(self):
        p = Params2048
        K = b"K" * 32
        M1 = session.client_proof(p, "alice", b"salt", 3, 5, K)
        expected = sha256(p.h_N_xor_h_g + sha256(b"alice").digest() +
                          b"salt" + p.pad(3) + p.pad(5) + K).digest()
        self.assertEqual(M1, expected)

    def test_server_proof_layout(self):
        p = Params2048
        M1, K = b"M" * 32, b"K" * 32
        self.assertEqual(session.server_proof(p, 3, M1, K),
                         sha256(p.pad(3) + M1 + K).digest())

class Exchange(unittest.TestCase):
    def run_exchange(self, p, I="alice", pw="password"):
        salt = identity.generate_salt(PRG(b"salt"))
        x, v = register(p, salt, I, pw)
        a, A = ephemeral.client_generate(p, PRG(b"a"))
        b, B = ephemeral.server_generate(p, v, PRG(b"b"))
        return salt, x, v, a, A, b, B

    def test_success(self):
        p = Params2048
        salt, x, v, a, A, b, B = self.run_exchange(p)
        K_c, M1 = session.derive_client_session(p, a, B, salt, "alice", x)
        K_s, M2 = session.derive_server_session(p, b, A, salt, "alice", v,
                                                bytes_to_number(M1))
        self.assertEqual(K_c, K_s)
        session.verify_server_proof(p, A, M1, K_c, bytes_to_number(M2))

    def test_explicit_A(self):
        p = Params1024
        salt, x, v, a, A, b, B = self.run_exchange(p)
        self.assertEqual(
            session.derive_client_session(p, a, B, salt, "alice", x),
            session.derive_client_session(p, a, B, salt, "alice", x, A=A))

    def test_zero_ephemerals(self):
        for p in ALL_PARAMS:
            for bad in [0, p.N]:
                self.assertRaises(InvalidEphemeral,
                                  session.derive_client_session,
                                  p, 5, bad, b"salt", "alice", 7)
                self.assertRaises(InvalidEphemeral,
                                  session.derive_server_session,
                                  p, 5, bad, b"salt", "alice", 7, 0)

    def test_wrong_password(self):
        p = Params1024
        salt, x, v, a, A, b, B = self.run_exchange(p)
        x_wrong = identity.derive_private_key(p, salt, "alice", "passwerd")
        K_c, M1 = session.derive_client_session(p, a, B, salt, "alice",
                                                x_wrong)
        self.assertRaises(InvalidClientProof, session.derive_server_session,
                          p, b, A, salt, "alice", v, bytes_to_number(M1))

    def test_oversized_client_proof(self):
        p = Params1024
        salt, x, v, a, A, b, B = self.run_exchange(p)
        self.assertRaises(InvalidClientProof, session.derive_server_session,
                          p, b, A, salt, "alice", v, 2**300)

    def test_wrong_server_proof(self):
        p = Params1024
        salt, x, v, a, A, b, B = self.run_exchange(p)
        K_c, M1 = session.derive_client_session(p, a, B, salt, "alice", x)
        K_s, M2 = session.derive_server_session(p, b, A, salt, "alice", v,
                                                bytes_to_number(M1))
        self.assertRaises(InvalidServerProof, session.verify_server_proof,
                          p, A, M1, K_c, bytes_to_number(M2) ^ 1)
        self.assertRaises(InvalidServerProof, session.verify_server_proof,
                          p, A, M1, K_c, bytes_to_number(M1))

if __name__ == '__main__':
    unittest.main()
