#!/usr/bin/env python3
"""
md5digest — Benchmark Suite

Compares the pure Python MD5 and the libcrypto binding against:
  Cryptographic:     hashlib MD5, SHA-1, SHA-256, BLAKE2b
  Non-cryptographic: xxHash64, xxHash128, MurmurHash3, CRC32
"""

import os
import sys
import time
import zlib
import hashlib

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from md5digest.md5 import md5
from md5digest import md5_c


def bench(name, func, data, iterations):
    for _ in range(min(5, iterations)):
        func(data)

    start = time.perf_counter()
    for _ in range(iterations):
        func(data)
    elapsed = time.perf_counter() - start

    ms_per_iter = (elapsed / iterations) * 1000
    bytes_per_sec = len(data) / (elapsed / iterations) if elapsed > 0 else 0
    mb_per_sec = bytes_per_sec / (1024 * 1024)

    return {
        'name': name,
        'ms_per_iter': ms_per_iter,
        'mb_per_sec': mb_per_sec,
        'total_time': elapsed,
        'iterations': iterations,
    }


def hash_md5(data): return hashlib.md5(data, usedforsecurity=False).digest()
def hash_sha1(data): return hashlib.sha1(data).digest()
def hash_sha256(data): return hashlib.sha256(data).digest()
def hash_blake2b(data): return hashlib.blake2b(data, digest_size=16).digest()
def hash_crc32(data): return zlib.crc32(data).to_bytes(4, 'little')


def optional_algorithms():
    algorithms = []
    try:
        import xxhash
        algorithms.append(('xxHash64', lambda d: xxhash.xxh64(d).digest(), 64))
        algorithms.append(('xxHash128', lambda d: xxhash.xxh128(d).digest(), 128))
    except ImportError:
        pass

    try:
        import mmh3
        algorithms.append(('MurmurHash3-128', lambda d: mmh3.hash128(d).to_bytes(16, 'little'), 128))
    except ImportError:
        pass
    return algorithms


def format_size(n):
    if n >= 1024 * 1024:
        return f"{n / (1024*1024):.0f} MB"
    elif n >= 1024:
        return f"{n / 1024:.0f} KB"
    else:
        return f"{n} B"


def run_benchmark(data_size_bytes, iterations):
    data = os.urandom(data_size_bytes)

    print(f"\n{'='*80}")
    print(f"  Benchmark: {format_size(data_size_bytes)} input | {iterations} iterations")
    print(f"{'='*80}")
    print(f"  {'Algorithm':<24} {'Output':>8} {'ms/iter':>10} {'MB/s':>12}")
    print(f"  {'-'*24} {'-'*8} {'-'*10} {'-'*12}")

    algorithms = []
    if md5_c.is_using_c_library():
        algorithms.append(('md5digest (libcrypto)', md5_c.md5, 128))
    algorithms.append(('md5digest (Python)', md5, 128))
    algorithms.append(('hashlib MD5', hash_md5, 128))
    algorithms.append(('SHA-1', hash_sha1, 160))
    algorithms.append(('SHA-256', hash_sha256, 256))
    algorithms.append(('BLAKE2b-128', hash_blake2b, 128))
    algorithms.extend(optional_algorithms())
    algorithms.append(('CRC32', hash_crc32, 32))

    results = []
    for name, func, bits in algorithms:
        iters = max(1, iterations // 100) if 'Python' in name and data_size_bytes > 10000 else iterations
        r = bench(name, func, data, iters)
        r['bits'] = bits
        results.append(r)
        marker = '***' if 'md5digest' in name else '   '
        print(f"  {marker} {name:<21} {bits:>5} bit {r['ms_per_iter']:>9.3f}ms {r['mb_per_sec']:>10.1f}")

    return results


def print_ranking(all_results):
    print(f"\n{'='*80}")
    print("  RANKING (by throughput, relative to hashlib MD5)")
    print(f"{'='*80}")

    for size_label, results in all_results:
        print(f"\n  [{size_label}]")
        md5_tp = next((r['mb_per_sec'] for r in results if r['name'] == 'hashlib MD5'), 1) or 1

        for r in sorted(results, key=lambda x: x['mb_per_sec'], reverse=True):
            ratio = r['mb_per_sec'] / md5_tp
            bar = '#' * int(min(ratio * 12, 40))
            print(f"    {r['name']:<24} {r['mb_per_sec']:>8.1f} MB/s  {ratio:>6.3f}x  {bar}")


if __name__ == '__main__':
    print("=" * 80)
    print("  md5digest — Performance Benchmark")
    print("=" * 80)
    print(f"\n  libcrypto: {'loaded' if md5_c.is_using_c_library() else 'not available'}")

    configs = [
        (16, 20000),
        (64, 20000),
        (1024, 5000),
        (65536, 200),
        (1048576, 20),
    ]

    all_results = []
    for data_size, iters in configs:
        all_results.append((format_size(data_size), run_benchmark(data_size, iters)))

    print_ranking(all_results)

    print(f"\n{'='*80}")
    print("  Benchmark complete.")
    print(f"{'='*80}")
