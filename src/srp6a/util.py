import os, binascii, hmac, math
from .errors import InvalidInput

def size_bits(maxval):
    return maxval.bit_length() or 1

def size_bytes(maxval):
    return int(math.ceil(size_bits(maxval) / 8))

def number_to_bytes(num):
    # minimal big-endian form. Zero is a single NUL byte, so both peers hash
    # the same thing for it.
    if num < 0:
        raise ValueError("cannot encode a negative number")
    num_bytes = size_bytes(num)
    fmt_str = "%0" + str(2*num_bytes) + "x"
    s_hex = fmt_str % num
    s = binascii.unhexlify(s_hex.encode("ascii"))
    assert len(s) == num_bytes
    return s

def bytes_to_number(s):
    if not isinstance(s, (bytes, bytearray)):
        raise TypeError("expected bytes, got %r" % type(s))
    if not s:
        return 0
    return int(binascii.hexlify(s), 16)

def pow_mod(base, exp, mod):
    if mod <= 0:
        raise ValueError("modulus must be positive")
    if exp < 0:
        raise ValueError("exponent must not be negative")
    # pow() squares-and-multiplies; reducing first keeps the base in [0,mod)
    return pow(base % mod, exp, mod)

def constant_length_equal(a, b):
    if len(a) != len(b):
        return False
    return hmac.compare_digest(bytes(a), bytes(b))

def xor_bytes(a, b):
    if len(a) != len(b):
        raise ValueError("can only XOR byte strings of equal length")
    return bytes(x ^ y for (x, y) in zip(a, b))

def to_hex(b):
    return binascii.hexlify(b).decode("ascii")

def decode(value):
    """Accept either raw bytes or their hex encoding, and return bytes.

    Hex strings may carry a leading '0x' and may have an odd number of
    digits, in which case they are read as if a '0' had been prepended.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if not isinstance(value, str):
        raise InvalidInput("expected bytes or a hex string, got %r"
                           % type(value))
    h = value.strip()
    if h[:2] in ("0x", "0X"):
        h = h[2:]
    if len(h) % 2:
        h = "0" + h
    try:
        return binascii.unhexlify(h.encode("ascii"))
    except (binascii.Error, UnicodeEncodeError):
        raise InvalidInput("not a hex string: %r" % value)

def random_bytes(bits, entropy_f=os.urandom):
    """Return enough bytes from entropy_f to hold 'bits' random bits.

    entropy_f is expected to behave like os.urandom. The only reason to not
    use os.urandom is for deterministic unit tests.
    """
    if bits <= 0:
        raise ValueError("bits must be positive")
    num_bytes = int(math.ceil(bits / 8))
    data = entropy_f(num_bytes)
    if len(data) != num_bytes:
        raise ValueError("entropy function returned %d bytes, wanted %d"
                         % (len(data), num_bytes))
    return data

def random_number(bits, entropy_f=os.urandom):
    # mask off the unwanted high bits of the top byte
    num = bytes_to_number(random_bytes(bits, entropy_f))
    return num & ((1 << bits) - 1)
