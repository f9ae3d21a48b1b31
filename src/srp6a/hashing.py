import hashlib
from .errors import UnsupportedAlgorithm

"""The hash pipeline.

Every SRP value (x, k, u, K, M1, M2) is the hash of an ordered list of
items. Text items are encoded as UTF-8, byte items are used as-is, and the
whole list is concatenated into a single buffer which is hashed once. Two
implementations agree only if they feed the same bytes in the same order,
so integers must be converted (with util.number_to_bytes) by the caller.
"""

SHA256 = "SHA-256"
SHA384 = "SHA-384"
SHA512 = "SHA-512"
SHA3_256 = "SHA3-256"
SHA3_384 = "SHA3-384"
SHA3_512 = "SHA3-512"

_ALGORITHMS = {
    SHA256: hashlib.sha256,
    SHA384: hashlib.sha384,
    SHA512: hashlib.sha512,
    SHA3_256: hashlib.sha3_256,
    SHA3_384: hashlib.sha3_384,
    SHA3_512: hashlib.sha3_512,
    }

ALGORITHMS = tuple(sorted(_ALGORITHMS))

TEXT_ENCODING = "utf-8"

def get_hash_function(algorithm):
    try:
        return _ALGORITHMS[algorithm]
    except (KeyError, TypeError):
        raise UnsupportedAlgorithm("invalid algorithm %r - available "
                                   "algorithms: %s"
                                   % (algorithm, ", ".join(ALGORITHMS)))

def digest_size(algorithm):
    return get_hash_function(algorithm)().digest_size

def _to_bytes(item):
    if isinstance(item, str):
        return item.encode(TEXT_ENCODING)
    if isinstance(item, (bytes, bytearray)):
        return bytes(item)
    raise TypeError("can only hash text or bytes, not %r" % type(item))

def hash_items(algorithm, items):
    hasher = get_hash_function(algorithm)
    data = b"".join([_to_bytes(item) for item in items])
    return hasher(data).digest()
