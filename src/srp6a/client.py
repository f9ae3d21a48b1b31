import os, logging
from collections import namedtuple
from .errors import (OutOfOrder, NotReady, InvalidInput, SecurityViolation,
                     InvalidPeerKey)
from .params import Params, DefaultParams
from .session import _Session
from .util import (bytes_to_number, number_to_bytes, pow_mod, to_hex, decode,
                   random_bytes, random_number, constant_length_equal)
from . import derive

log = logging.getLogger(__name__)

SetupResult = namedtuple("SetupResult", ["I", "v", "s", "v_hex", "s_hex"])
InitResult = namedtuple("InitResult", ["I", "A", "A_hex"])
ProofResult = namedtuple("ProofResult", ["M1", "M1_hex"])

def _new_salt(bits, entropy_f):
    while True:
        s = random_bytes(bits, entropy_f)
        # an all-zero salt would be refused by the server
        if bytes_to_number(s):
            return s

class ClientSetup:
    """Compute the salt and verifier for a new account.

    Run this once, when the user registers or changes their password, and
    send I, v and s to the server (as raw bytes or hex). The password itself
    never leaves this object.
    """

    def __init__(self, username, password, salt=None,
                 params=DefaultParams, entropy_f=os.urandom):
        assert isinstance(params, Params), repr(params)
        self.params = params
        self.I = derive.encode_identity(username, params)
        self.p = derive.encode_password(password)
        if salt is None:
            self.s = _new_salt(params.salt_bits, entropy_f)
        else:
            self.s = decode(salt)
            if bytes_to_number(self.s) == 0:
                raise InvalidInput("salt must not be empty or zero")
        self._x = None
        self._started = False

    def init(self):
        if self._started:
            raise OutOfOrder("init() can only be called once")
        self._started = True

        self._x = self._compute_x()
        v = self._compute_v()
        if v == 0:
            raise SecurityViolation("computed a zero verifier")
        v_bytes = number_to_bytes(v)
        log.debug("computed verifier for %d-bit group %s",
                  self.params.group.size_bits, self.params.group.name)
        # I goes back out as text, so the server stores exactly what the
        # client will hash later
        return SetupResult(I=self.I.decode("utf-8"),
                           v=v_bytes, s=self.s,
                           v_hex=to_hex(v_bytes), s_hex=to_hex(self.s))

    def _compute_x(self):
        return derive.compute_x(self.params.algorithm, self.s, self.I, self.p)

    def _compute_v(self):
        if self._x is None:
            raise NotReady("x has not been computed yet")
        g = self.params.group
        return pow_mod(g.g, self._x, g.N)


Created = namedtuple("Created", [])
AInitialized = namedtuple("AInitialized", ["a", "A"])
Exchanged = namedtuple("Exchanged", ["A", "B", "s", "K"])
Authenticated = namedtuple("Authenticated", ["A", "K", "M1"])
ServerVerified = namedtuple("ServerVerified", ["K"])

class ClientAuthenticate(_Session):
    """The client's half of one login.

    Call the four steps in order, passing each result to the server and each
    server reply to the next step:

        c = ClientAuthenticate(username, password, params=params)
        I, A, A_hex = c.init()          # send I, A
        c.exchange(B, s)                # received from the server
        M1 = c.authenticate().M1        # send M1
        c.verify_server(M2)             # received from the server
        key = c.session_key

    verify_server() raises SecurityViolation if the server's proof is wrong.
    In that case the server may already believe the client has logged in,
    so the caller must treat the whole session as compromised.
    """

    side = "client"
    Verified = ServerVerified

    def __init__(self, username, password,
                 params=DefaultParams, entropy_f=os.urandom):
        _Session.__init__(self, params=params, entropy_f=entropy_f)
        self.I = derive.encode_identity(username, params)
        self.p = derive.encode_password(password)
        self._state = Created()

    def init(self):
        return self._advance(Created, "init", self._init)

    def _init(self, state):
        g = self.params.group
        a = 0
        while a == 0:
            a = random_number(self.params.ephemeral_bits, self.entropy_f)
        A = pow_mod(g.g, a, g.N)
        A_bytes = number_to_bytes(A)
        return (AInitialized(a=a, A=A),
                InitResult(I=self.I.decode("utf-8"),
                           A=A_bytes, A_hex=to_hex(A_bytes)))

    def exchange(self, B, s):
        """Accept the server's public value B and the stored salt s, either
        as bytes or hex, and derive the session key."""
        return self._advance(AInitialized, "exchange", self._exchange, B, s)

    def _exchange(self, state, B, s):
        g = self.params.group
        alg = self.params.algorithm
        B = bytes_to_number(decode(B))
        s = decode(s)
        if B % g.N == 0:
            raise InvalidPeerKey("server sent B = 0 (mod N). This is probably"
                                 " a misconfiguration, but possibly an active"
                                 " attack")
        if bytes_to_number(s) == 0:
            raise SecurityViolation("server sent an empty or zero salt")
        u = derive.compute_u(alg, state.A, B)
        if u == 0:
            raise InvalidPeerKey("u = 0. This is probably a misconfiguration,"
                                 " but possibly an active attack")

        k = derive.compute_k(alg, g)
        x = derive.compute_x(alg, s, self.I, self.p)
        # the base is reduced into [0,N) before exponentiation, the exponent
        # is used as-is
        base = (B - k * pow_mod(g.g, x, g.N)) % g.N
        S = pow_mod(base, state.a + u * x, g.N)
        K = derive.compute_K(alg, S)
        return Exchanged(A=state.A, B=B, s=s, K=K), None

    def authenticate(self):
        """Compute the client's proof M1, to be sent to the server."""
        return self._advance(Exchanged, "authenticate", self._authenticate)

    def _authenticate(self, state):
        M1 = derive.compute_M1(self.params.algorithm, self.params.group,
                               self.I, state.s, state.A, state.B, state.K)
        return (Authenticated(A=state.A, K=state.K, M1=M1),
                ProofResult(M1=M1, M1_hex=to_hex(M1)))

    def verify_server(self, M2):
        return self._advance(Authenticated, "verify_server",
                             self._verify_server, M2)

    def _verify_server(self, state, M2):
        expected = derive.compute_M2(self.params.algorithm,
                                     state.A, state.M1, state.K)
        if not constant_length_equal(expected, decode(M2)):
            raise SecurityViolation("server's M2 does not match the expected"
                                    " value. The server cannot be trusted: it"
                                    " is either misconfigured or an attacker")
        return ServerVerified(K=state.K), None
