#!/usr/bin/env python3
"""
md5digest — Statistical Quality Checks

These are regression guards for the round function, not security claims:
a wrong rotation or a missing mask shows up as bias long before it shows
up as a wrong test vector on some input we did not think of.

  - Avalanche (SAC) with flip rate and per-bit bias
  - Short-input avalanche (1-15 bytes)
  - Bit distribution
  - Length sensitivity around the 55/56 padding boundary
  - Length extension (MD5 is expected to be extendable)
"""

import os
import sys
import random

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from md5digest.md5 import md5, md5_pad, md5_compress, md5_serialize

DIGEST_BITS = 128


def bit_diff(a, b):
    diff = 0
    for x, y in zip(a, b):
        diff += bin(x ^ y).count('1')
    return diff


def test_avalanche(n_trials=200, input_len=16):
    print("\n--- Test 1: Avalanche (Strict Avalanche Criterion) ---")
    rng = random.Random(42)

    total_hd = 0
    total_flips = 0
    min_hd = 999
    max_hd = 0
    bit_flip_counts = [0] * DIGEST_BITS

    for _ in range(n_trials):
        base = bytes(rng.getrandbits(8) for _ in range(input_len))
        h_base = md5(base)

        for byte_pos in range(input_len):
            for bit_pos in range(8):
                modified = bytearray(base)
                modified[byte_pos] ^= (1 << bit_pos)
                h_mod = md5(modified)
                hd = bit_diff(h_base, h_mod)
                total_hd += hd
                total_flips += 1
                min_hd = min(min_hd, hd)
                max_hd = max(max_hd, hd)

                for ob in range(16):
                    diff_byte = h_base[ob] ^ h_mod[ob]
                    for obit in range(8):
                        if diff_byte & (1 << obit):
                            bit_flip_counts[ob * 8 + obit] += 1

    avg_hd = total_hd / total_flips
    flip_rate = avg_hd / DIGEST_BITS
    deviation = abs(flip_rate - 0.5) * 100
    max_bit_bias = max(abs(count / total_flips - 0.5) * 100 for count in bit_flip_counts)

    print(f"  Trials: {n_trials} x {input_len * 8} bits = {total_flips} flips")
    print(f"  Avg Hamming Distance: {avg_hd:.2f} / {DIGEST_BITS} ({flip_rate:.4%})")
    print(f"  Deviation from 50%:  {deviation:.3f}%")
    print(f"  Min HD: {min_hd}, Max HD: {max_hd}")
    print(f"  Max output-bit bias: {max_bit_bias:.2f}%")
    return deviation < 1.0 and min_hd > 25 and max_hd < 103 and max_bit_bias < 5.0


def test_short_avalanche(n_short=100):
    print("\n--- Test 2: Short-Input Avalanche (1-15 Bytes) ---")
    rng = random.Random(999)

    print(f"  {'Length':>8} {'Avg HD':>8} {'Min HD':>8} {'Max HD':>8} {'Bias%':>8} {'Status':>8}")
    short_ok = True
    for length in range(1, 16):
        total = 0
        count = 0
        smin = 999
        smax = 0
        for _ in range(n_short):
            base = bytes(rng.getrandbits(8) for _ in range(length))
            h_base = md5(base)
            for bit_pos in range(length * 8):
                modified = bytearray(base)
                modified[bit_pos // 8] ^= (1 << (bit_pos % 8))
                hd = bit_diff(h_base, md5(modified))
                total += hd
                count += 1
                smin = min(smin, hd)
                smax = max(smax, hd)
        avg = total / count
        bias = abs(avg / DIGEST_BITS - 0.5) * 100
        status = "OK" if bias < 2.0 and smin > 20 else "WARN"
        if status != "OK":
            short_ok = False
        print(f"  {length:>5} B  {avg:>7.2f}  {smin:>7}  {smax:>7}  {bias:>7.3f}  {status:>7}")
    return short_ok


def test_bit_distribution(n_dist=10000):
    print("\n--- Test 3: Bit Distribution ---")
    bit_ones = [0] * DIGEST_BITS
    rng = random.Random(777)

    for _ in range(n_dist):
        h = md5(bytes(rng.getrandbits(8) for _ in range(32)))
        for byte_idx in range(16):
            for bit_idx in range(8):
                if h[byte_idx] & (1 << bit_idx):
                    bit_ones[byte_idx * 8 + bit_idx] += 1

    biases = [abs(count / n_dist - 0.5) * 100 for count in bit_ones]
    max_bias = max(biases)
    avg_bias = sum(biases) / DIGEST_BITS

    print(f"  Samples: {n_dist}")
    print(f"  Max bit bias:  {max_bias:.2f}%")
    print(f"  Avg bit bias:  {avg_bias:.2f}%")
    return max_bias < 3.0


def test_length_sensitivity(n_len=500):
    print("\n--- Test 4: Length Sensitivity ---")
    rng = random.Random(333)
    pairs = [(54, 55), (55, 56), (56, 57), (63, 64), (64, 65), (119, 120)]

    print(f"  {'Pair':>12} {'Avg HD':>8} {'Min HD':>8} {'Status':>8}")
    len_ok = True
    for l1, l2 in pairs:
        total = 0
        lmin = 999
        for _ in range(n_len):
            data = bytes(rng.getrandbits(8) for _ in range(max(l1, l2)))
            hd = bit_diff(md5(data[:l1]), md5(data[:l2]))
            total += hd
            lmin = min(lmin, hd)
        avg = total / n_len
        status = "OK" if abs(avg - 64) < 4 and lmin > 25 else "WARN"
        if status != "OK":
            len_ok = False
        print(f"  {l1:>4}B vs {l2:>3}B  {avg:>7.2f}  {lmin:>7}  {status:>7}")
    return len_ok


def test_length_extension(n_le=200):
    """Forge md5(m || pad(m) || x) from md5(m) and len(m) alone."""
    print("\n--- Test 5: Length Extension (expected: extendable) ---")
    rng = random.Random(888)
    forged = 0

    for _ in range(n_le):
        m = bytes(rng.getrandbits(8) for _ in range(rng.randrange(0, 100)))
        x = bytes(rng.getrandbits(8) for _ in range(rng.randrange(1, 40)))
        h_m = md5(m)

        glue = md5_pad(m)[len(m):]
        prefix_len = len(m) + len(glue)
        state = tuple(int.from_bytes(h_m[i:i + 4], 'little') for i in range(0, 16, 4))
        tail = md5_pad(bytes(prefix_len) + x)[prefix_len:]
        for offset in range(0, len(tail), 64):
            state = md5_compress(state, tail, offset)

        if md5_serialize(state) == md5(m + glue + x):
            forged += 1

    print(f"  Trials: {n_le}")
    print(f"  Forged extensions: {forged}")
    return forged == n_le


if __name__ == '__main__':
    print("=" * 70)
    print("  md5digest — Statistical Quality Checks")
    print("=" * 70)

    all_pass = True
    for check in (test_avalanche, test_short_avalanche, test_bit_distribution,
                  test_length_sensitivity, test_length_extension):
        ok = check()
        print(f"  => {'PASS' if ok else 'FAIL'}")
        if not ok:
            all_pass = False

    print("\n" + "=" * 70)
    if all_pass:
        print("  RESULT: ALL CHECKS PASSED")
    else:
        print("  RESULT: SOME CHECKS FAILED")
    print("=" * 70)
    sys.exit(0 if all_pass else 1)
