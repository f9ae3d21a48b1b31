import os, logging
from collections import namedtuple
from .errors import InvalidInput, SecurityViolation, InvalidPeerKey
from .params import DefaultParams
from .session import _Session
from .util import (bytes_to_number, number_to_bytes, pow_mod, to_hex, decode,
                   random_number, constant_length_equal)
from . import derive

log = logging.getLogger(__name__)

Credentials = namedtuple("Credentials", ["username", "salt", "verifier"])
Challenge = namedtuple("Challenge", ["B", "B_hex", "s", "s_hex"])
ServerProof = namedtuple("ServerProof", ["M2", "M2_hex"])

def _username_text(I):
    if isinstance(I, (bytes, bytearray)):
        try:
            return bytes(I).decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidInput("I must be valid UTF-8")
    if not isinstance(I, str):
        raise InvalidInput("I must be str or bytes, not %r" % type(I))
    return I

class ServerSetup:
    """Check a registration (I, s, v) received from a client.

    verify() returns the Credentials record that should be stored. Storing it
    is up to the caller.
    """

    def __init__(self, I, s, v):
        self.I = _username_text(I)
        self.s = decode(s)
        self.v = bytes_to_number(decode(v))

    def verify(self):
        if len(self.I) == 0:
            raise InvalidInput("I must not be empty")
        if len(self.s) == 0 or bytes_to_number(self.s) == 0:
            raise SecurityViolation("s must not be empty or equal zero")
        if self.v == 0:
            raise SecurityViolation("v must not be zero")
        log.debug("accepted registration for a %d-byte username",
                  len(self.I))
        return self.get_credentials()

    def get_credentials(self):
        return Credentials(username=self.I,
                           salt=to_hex(self.s),
                           verifier=to_hex(number_to_bytes(self.v)))


Created = namedtuple("Created", [])
Challenged = namedtuple("Challenged", ["A", "b", "B"])
ClientVerified = namedtuple("ClientVerified", ["K"])

class ServerAuthenticate(_Session):
    """The server's half of one login, for a stored (I, s, v) record.

        srv = ServerAuthenticate(creds.username, creds.salt, creds.verifier,
                                 params=params)
        B, B_hex, s, s_hex = srv.init(A)   # A from the client, send B, s
        M2 = srv.verify_client(M1).M2      # M1 from the client, send M2
        key = srv.session_key

    verify_client() raises SecurityViolation when the client's proof does
    not match, which is what a wrong password looks like.
    """

    side = "server"
    Verified = ClientVerified

    def __init__(self, I, s, v, params=DefaultParams, entropy_f=os.urandom):
        _Session.__init__(self, params=params, entropy_f=entropy_f)
        creds = ServerSetup(I, s, v).verify()
        self.I = creds.username.encode("utf-8")
        self.s = decode(creds.salt)
        self.v = bytes_to_number(decode(creds.verifier))
        if self.v % params.group.N == 0:
            raise SecurityViolation("v must not be zero (mod N)")
        self._state = Created()

    def init(self, A):
        """Accept the client's public value A (bytes or hex) and return the
        challenge (B and the salt) to send back."""
        return self._advance(Created, "init", self._init, A)

    def _init(self, state, A):
        g = self.params.group
        alg = self.params.algorithm
        A = bytes_to_number(decode(A))
        if A % g.N == 0:
            raise InvalidPeerKey("client sent A = 0 (mod N). This is probably"
                                 " a misconfiguration, but possibly an active"
                                 " attack")
        k = derive.compute_k(alg, g)
        b, B = 0, 0
        while b == 0 or B == 0:
            b = random_number(self.params.ephemeral_bits, self.entropy_f)
            B = (k * self.v + pow_mod(g.g, b, g.N)) % g.N
        B_bytes = number_to_bytes(B)
        return (Challenged(A=A, b=b, B=B),
                Challenge(B=B_bytes, B_hex=to_hex(B_bytes),
                          s=self.s, s_hex=to_hex(self.s)))

    def verify_client(self, M1):
        """Check the client's proof M1 and return the server's proof M2."""
        return self._advance(Challenged, "verify_client",
                             self._verify_client, M1)

    def _verify_client(self, state, M1):
        g = self.params.group
        alg = self.params.algorithm
        u = derive.compute_u(alg, state.A, state.B)
        if u == 0:
            raise InvalidPeerKey("u = 0. This is probably a misconfiguration,"
                                 " but possibly an active attack")
        S = pow_mod(state.A * pow_mod(self.v, u, g.N), state.b, g.N)
        K = derive.compute_K(alg, S)
        expected = derive.compute_M1(alg, g, self.I, self.s,
                                     state.A, state.B, K)
        M1 = decode(M1)
        if not constant_length_equal(expected, M1):
            raise SecurityViolation("client's M1 does not match the expected"
                                    " value: wrong password, or an attacker")
        M2 = derive.compute_M2(alg, state.A, M1, K)
        return (ClientVerified(K=K),
                ServerProof(M2=M2, M2_hex=to_hex(M2)))
