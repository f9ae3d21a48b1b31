from .client import ClientSetup, ClientAuthenticate
from .server import ServerSetup, ServerAuthenticate
from .params import Params, DefaultParams
from .groups import Group, GROUPS, get_group
from .hashing import (hash_items, ALGORITHMS, SHA256, SHA384, SHA512,
                      SHA3_256, SHA3_384, SHA3_512)
from .util import random_bytes
from .errors import (SRPError, UnsupportedAlgorithm, UnknownGroup, OutOfOrder,
                     NotReady, InvalidInput, SecurityViolation,
                     InvalidPeerKey)
_hush_pyflakes = [ClientSetup, ClientAuthenticate, ServerSetup,
                  ServerAuthenticate, Params, DefaultParams,
                  Group, GROUPS, get_group,
                  hash_items, ALGORITHMS, SHA256, SHA384, SHA512,
                  SHA3_256, SHA3_384, SHA3_512, random_bytes,
                  SRPError, UnsupportedAlgorithm, UnknownGroup, OutOfOrder,
                  NotReady, InvalidInput, SecurityViolation, InvalidPeerKey]
del _hush_pyflakes

from ._version import __version__
