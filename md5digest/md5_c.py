"""
MD5 — libcrypto Binding Wrapper

This module provides Python bindings to OpenSSL's one-shot MD5() function
in libcrypto. Falls back to pure Python if libcrypto is unavailable.

Usage:
    from md5digest.md5_c import md5, md5_hex

    digest = md5("hunter2")      # 16 bytes
    hex_str = md5_hex(b"Hello")  # hex string

Configuration:
    MD5DIGEST_LIBCRYPTO  path or soname of libcrypto, tried first
"""

import os
import ctypes
import ctypes.util
import logging

from .md5 import DIGEST_SIZE, md5_encode

logger = logging.getLogger(__name__)

LIBCRYPTO_ENV = 'MD5DIGEST_LIBCRYPTO'

_lib = None
_use_pure_python = False


def _candidate_names():
    names = []
    configured = os.environ.get(LIBCRYPTO_ENV)
    if configured:
        names.append(configured)
    found = ctypes.util.find_library('crypto')
    if found:
        names.append(found)
    names.extend(['libcrypto.so.3', 'libcrypto.so.1.1', 'libcrypto.dylib'])
    return names


def _load_library():
    """Load libcrypto and bind MD5()."""
    global _lib, _use_pure_python

    if _lib is not None or _use_pure_python:
        return _lib

    for name in _candidate_names():
        try:
            lib = ctypes.CDLL(name)
            lib.MD5.argtypes = [ctypes.c_char_p, ctypes.c_size_t, ctypes.c_char_p]
            lib.MD5.restype = ctypes.c_void_p
        except (OSError, AttributeError) as e:
            logger.debug("Cannot use %s: %s", name, e)
            continue
        logger.debug("Loaded MD5 from %s", name)
        _lib = lib
        return _lib

    logger.debug("libcrypto not found, using pure Python MD5")
    _use_pure_python = True
    return None


def md5(data) -> bytes:
    """
    Compute MD5 of the given input data.

    Uses libcrypto when available.
    Falls back to pure Python if libcrypto is unavailable.

    Args:
        data: str (hashed as UTF-8) or bytes-like input

    Returns:
        16 bytes (128-bit digest)
    """
    lib = _load_library()

    if _use_pure_python:
        from .md5 import md5 as py_md5
        return py_md5(data)

    message = md5_encode(data)
    output = ctypes.create_string_buffer(DIGEST_SIZE)
    lib.MD5(message, len(message), output)
    return output.raw


def md5_hex(data) -> str:
    """Compute MD5 and return as hexadecimal string."""
    return md5(data).hex()


def md5_ints(data) -> list:
    """Compute MD5 and return it as a list of 16 byte values."""
    return list(md5(data))


def is_using_c_library() -> bool:
    """Check if libcrypto is being used."""
    _load_library()
    return not _use_pure_python


digest = md5


if __name__ == '__main__':
    import sys

    print(f"Using libcrypto: {is_using_c_library()}")

    text = sys.argv[1] if len(sys.argv) > 1 else ''

    print(f"Input: {repr(text)}")
    print(f"Hash:  {md5_hex(text)}")
