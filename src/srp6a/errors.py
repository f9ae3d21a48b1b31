
class SRPError(Exception):
    """Protocol error: malformed input, an out-of-order call, or an
    unsupported configuration. The instance that raised it must be
    discarded, but a fresh instance may be tried."""
class UnsupportedAlgorithm(SRPError):
    pass
class UnknownGroup(SRPError):
    pass
class OutOfOrder(SRPError):
    """Protocol steps were called in the wrong order, or an instance was
    re-used after it finished or failed. Re-using an SRP instance is likely
    to leak information about the password or the session key."""
class NotReady(SRPError):
    """An internal value was needed before it had been computed."""
class InvalidInput(SRPError):
    pass

class SecurityViolation(SRPError):
    """The peer sent something that only a badly broken implementation or an
    active attacker would send. The session must be abandoned, and a client
    that sees this during verify_server() must assume the server may already
    consider it authenticated."""
class InvalidPeerKey(SecurityViolation):
    """The peer's public value (or the scrambler derived from it) is zero
    modulo N."""
