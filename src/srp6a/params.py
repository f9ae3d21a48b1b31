from hashlib import sha256
from .groups import get_group
from .hashing import SHA256, get_hash_function

# Both peers must agree on every field here: the group and the hash
# algorithm go into every derived value, and hash_identity changes the 'I'
# that is mixed into x and M1. The bit lengths only affect locally generated
# randomness, so they may differ between peers.

class Params:
    def __init__(self, group="2048", algorithm=SHA256, salt_bits=192,
                 ephemeral_bits=256, hash_identity=False):
        self.group = get_group(group)
        get_hash_function(algorithm) # raises UnsupportedAlgorithm
        self.algorithm = algorithm
        if salt_bits <= 0:
            raise ValueError("salt_bits must be positive")
        if ephemeral_bits <= 0:
            raise ValueError("ephemeral_bits must be positive")
        self.salt_bits = salt_bits
        self.ephemeral_bits = ephemeral_bits
        self.hash_identity = bool(hash_identity)

    def hash_params(self):
        # a short fingerprint that peers can compare out-of-band. Any change
        # to the group, the algorithm, or the identity mode changes it.
        pieces = [self.group.N_bytes(), self.group.g_bytes(),
                  self.algorithm.encode("ascii"),
                  b"hashed-I" if self.hash_identity else b"plain-I"]
        return sha256(b":".join(pieces)).hexdigest()

    def __repr__(self):
        return ("<Params group=%s algorithm=%s salt_bits=%d "
                "ephemeral_bits=%d hash_identity=%s>"
                % (self.group.name, self.algorithm, self.salt_bits,
                   self.ephemeral_bits, self.hash_identity))

DefaultParams = Params()
