"""
md5digest — Python Implementation

Two implementations available:
- md5.py     — Pure Python (zero dependencies)
- md5_c.py   — libcrypto binding (falls back to md5.py)

Usage:
    # Pure Python
    from md5digest.md5 import md5, md5_hex

    # libcrypto (faster)
    from md5digest.md5_c import md5, md5_hex

    digest = md5("hunter2")          # 16 bytes
    hex_str = md5_hex("hunter2")     # hex string
    wire = md5_ints("hunter2")       # [42, 181, ...] for md5_password
"""

from .md5 import digest, md5, md5_hex, md5_ints

__all__ = ['digest', 'md5', 'md5_hex', 'md5_ints']
__version__ = '1.0.0'
