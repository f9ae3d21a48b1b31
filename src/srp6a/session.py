import os, logging
from collections import namedtuple
from .errors import OutOfOrder, SecurityViolation
from .params import Params, DefaultParams
from . import derive

log = logging.getLogger(__name__)

Failed = namedtuple("Failed", ["step"])

class _Session:
    """One side of a single SRP authentication attempt.

    The instance holds exactly one state object. Its type says which step
    comes next, and its fields are the values that step needs. Each step
    replaces the state with the next one. Anything that goes wrong moves the
    instance to Failed, from which every call raises OutOfOrder: a failed
    attempt must be restarted with a new instance, since the values it kept
    may have been chosen by an attacker.
    """

    side = None # set by the subclass
    Verified = None # the state class that holds a trustworthy K

    def __init__(self, params=DefaultParams, entropy_f=os.urandom):
        assert isinstance(params, Params), repr(params)
        self.params = params
        self.entropy_f = entropy_f
        self._state = None # set by the subclass

    @property
    def state(self):
        return type(self._state).__name__

    def _advance(self, expected, name, step, *args):
        state = self._state
        if not isinstance(state, expected):
            self._state = Failed(name)
            raise OutOfOrder("%s() cannot be called in state %s"
                             % (name, type(state).__name__))
        try:
            new_state, result = step(state, *args)
        except SecurityViolation as e:
            log.warning("%s: security violation during %s(): %s",
                        self.side, name, e)
            self._state = Failed(name)
            raise
        except Exception:
            self._state = Failed(name)
            raise
        log.debug("%s: %s() %s -> %s", self.side, name,
                  type(state).__name__, type(new_state).__name__)
        self._state = new_state
        return result

    @property
    def session_key(self):
        """The shared key K. Only available once the peer's proof has been
        checked."""
        if not isinstance(self._state, self.Verified):
            raise OutOfOrder("the session key is not trustworthy until the "
                             "peer has been verified")
        return self._state.K

    def derive_key(self, info, length=32):
        """Expand the verified session key into an application key, using
        HKDF with the session's hash algorithm. Different 'info' strings
        give independent keys."""
        return derive.expand_session_key(self.params.algorithm,
                                         self.session_key, info, length)
