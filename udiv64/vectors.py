#!/usr/bin/env python3

"""
Generates random test vectors for unsigned 64-bit division.

Each line is `0x<dividend> 0x<divisor> 0x<quotient> 0x<remainder>`.
"""

import random
import sys

N = 1024


def random_operands(rng=random):
    dividend = rng.getrandbits(64)
    # pick the divisor width first, or nearly every quotient is 0 or 1
    bits = rng.randint(1, 64)
    divisor = rng.getrandbits(bits) | 1 << (bits - 1)

    return dividend, divisor


def generate(count=N, rng=random):
    for _ in range(count):
        dividend, divisor = random_operands(rng)
        quotient, remainder = divmod(dividend, divisor)

        yield dividend, divisor, quotient, remainder


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    count = N

    if len(argv) > 1:
        sys.stderr.write("Usage: udiv64-vectors [count]\n")
        return 1

    if argv:
        try:
            count = int(argv[0])
        except ValueError:
            count = -1

        if count < 0:
            sys.stderr.write(f"Invalid count: {argv[0]}\n")
            return 1

    for dividend, divisor, quotient, remainder in generate(count):
        print(f"0x{dividend:x} 0x{divisor:x} 0x{quotient:x} 0x{remainder:x}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
