from hkdf import Hkdf
from .errors import InvalidInput
from .hashing import hash_items, get_hash_function
from .util import number_to_bytes, bytes_to_number, xor_bytes, to_hex

# I = username, or hex(H(username)) when Params.hash_identity is set
# x = H(s | H(I | ":" | p))
# v = g^x % N
# k = H(N | g)
# u = H(A | B)
#  client: S = (B - k*g^x) ^ (a + u*x) % N
#  server: S = (A * v^u) ^ b % N
# K = H(S)
# M1 = H(H(N) XOR H(g) | I | s | A | B | K)
# M2 = H(A | M1 | K)
#
# Integers (N, g, A, B, S) are hashed in their minimal big-endian form. The
# salt is hashed exactly as generated, leading zero bytes included.

def text_to_bytes(value, what):
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise InvalidInput("%s must be str or bytes, not %r" % (what, type(value)))

def encode_identity(username, params):
    I = text_to_bytes(username, "username")
    try:
        I.decode("utf-8")
    except UnicodeDecodeError:
        raise InvalidInput("username must be valid UTF-8")
    if params.hash_identity:
        I = to_hex(hash_items(params.algorithm, [I])).encode("ascii")
    return I

def encode_password(password):
    return text_to_bytes(password, "password")

def compute_x(algorithm, s, I, p):
    identity = hash_items(algorithm, [I, ":", p])
    return bytes_to_number(hash_items(algorithm, [s, identity]))

def compute_k(algorithm, group):
    return bytes_to_number(hash_items(algorithm, [group.N_bytes(),
                                                  group.g_bytes()]))

def compute_u(algorithm, A, B):
    return bytes_to_number(hash_items(algorithm, [number_to_bytes(A),
                                                  number_to_bytes(B)]))

def compute_K(algorithm, S):
    return hash_items(algorithm, [number_to_bytes(S)])

def compute_M1(algorithm, group, I, s, A, B, K):
    HN = hash_items(algorithm, [group.N_bytes()])
    Hg = hash_items(algorithm, [group.g_bytes()])
    return hash_items(algorithm, [xor_bytes(HN, Hg), I, s,
                                  number_to_bytes(A), number_to_bytes(B), K])

def compute_M2(algorithm, A, M1, K):
    return hash_items(algorithm, [number_to_bytes(A), M1, K])

def expand_session_key(algorithm, K, info, length):
    h = Hkdf(salt=b"", input_key_material=K,
             hash=get_hash_function(algorithm))
    return h.expand(text_to_bytes(info, "info"), length)
