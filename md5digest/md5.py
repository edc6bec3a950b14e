"""
MD5 — Pure Python Reference Implementation (RFC 1321)

This is the pure Python implementation with zero external dependencies.
For a faster path, use the libcrypto binding (md5_c.py).

Pipeline:
  E: Encoder     — str -> UTF-8 bytes (lone surrogates become U+FFFD)
  P: Padder      — 0x80, zero fill to 56 mod 64, 64-bit LE bit length
  C: Compressor  — 64 rounds per 64-byte block over a 4x32-bit state
  S: Serializer  — state words as 16 little-endian bytes

MD5 is broken against collisions and preimages. It is kept only because
the coordinator authenticates with this exact digest.
"""

import struct

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

BLOCK_SIZE = 64
DIGEST_SIZE = 16

INIT_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# floor(abs(sin(i + 1)) * 2**32)
K = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

R = (
    7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22,
    5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20,
    4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23,
    6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21,
)

_16I_UNPACK = struct.Struct('<16I').unpack_from
_4I_PACK = struct.Struct('<4I').pack
_Q_PACK = struct.Struct('<Q').pack


def _rotl32(x, r):
    r &= 31
    return ((x << r) | (x >> (32 - r))) & MASK32


def md5_encode(data) -> bytes:
    """Return the byte sequence that gets hashed for ``data``."""
    if isinstance(data, str):
        try:
            return data.encode('utf-8')
        except UnicodeEncodeError:
            # Re-pair surrogates and replace the lone ones with U+FFFD
            data = data.encode('utf-16-le', 'surrogatepass').decode('utf-16-le', 'replace')
            return data.encode('utf-8')
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"md5 input must be str or bytes-like, not {type(data).__name__}")


def md5_pad(message: bytes) -> bytearray:
    """Pad ``message`` to a multiple of 64 bytes (RFC 1321, section 3.1-3.2)."""
    bit_length = (len(message) * 8) & MASK64
    padded = bytearray(message)
    padded.append(0x80)
    padded.extend(b'\x00' * ((56 - len(padded)) % BLOCK_SIZE))
    padded.extend(_Q_PACK(bit_length))
    return padded


def md5_compress(state, block, offset=0):
    """Fold one 64-byte block into ``state`` and return the new 4-tuple."""
    mask = MASK32
    k = K
    r = R
    w = _16I_UNPACK(block, offset)

    a, b, c, d = state

    for i in range(64):
        if i < 16:
            f = (b & c) | (~b & d)
            g = i
        elif i < 32:
            f = (d & b) | (~d & c)
            g = (5 * i + 1) & 15
        elif i < 48:
            f = b ^ c ^ d
            g = (3 * i + 5) & 15
        else:
            f = c ^ (b | (~d & mask))
            g = (7 * i) & 15

        f = (f + a + k[i] + w[g]) & mask
        a, d, c = d, c, b
        b = (b + _rotl32(f, r[i])) & mask

    return (
        (state[0] + a) & mask,
        (state[1] + b) & mask,
        (state[2] + c) & mask,
        (state[3] + d) & mask,
    )


def md5_serialize(state) -> bytes:
    """Return the 16-byte digest for a final state."""
    return _4I_PACK(*state)


def md5(data) -> bytes:
    """Compute MD5 of the given str or bytes. Returns 16 bytes."""
    padded = md5_pad(md5_encode(data))
    state = INIT_STATE
    for offset in range(0, len(padded), BLOCK_SIZE):
        state = md5_compress(state, padded, offset)
    return md5_serialize(state)


def md5_hex(data) -> str:
    """Return hex string representation of MD5."""
    return md5(data).hex()


def md5_ints(data) -> list:
    """Return the digest as 16 integers, the ``md5_password`` wire shape."""
    return list(md5(data))


digest = md5


if __name__ == '__main__':
    import sys
    text = sys.argv[1] if len(sys.argv) > 1 else ''
    print(md5_hex(text))
