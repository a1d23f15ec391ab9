#!/usr/bin/env python3

"""
Unsigned 64-bit division of two hex constants.

Prints the dividend, divisor, quotient and remainder, one per line, in
lowercase hex without a prefix or padding.
"""

import re
import sys

from dataclasses import dataclass

import numpy as np

DIVIDEND = 0xc9649f05a8e1a8bb
DIVISOR = 0x82f6747f707af2c0

U64_MAX = (1 << 64) - 1

HEX = re.compile(r"(?:0[xX])?([0-9a-fA-F]+)")


def parse_hex(value):
    match = HEX.fullmatch(value)

    if match is None:
        raise ValueError(f"not a hex number: {value!r}")

    return int(match[1], 16)


def check_u64(name, value):
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{name} out of range for u64: {value:#x}")


@dataclass(frozen=True)
class Operands:
    n: int
    d: int

    def __post_init__(self):
        check_u64("dividend", self.n)
        check_u64("divisor", self.d)


@dataclass(frozen=True)
class Result:
    q: int
    r: int


def divide(operands):
    if operands.d == 0:
        raise ZeroDivisionError("division by zero")

    # both sides must be uint64: the high bit is set in the defaults
    n = np.uint64(operands.n)
    d = np.uint64(operands.d)

    return Result(int(n // d), int(n % d))


def format_result(operands, result):
    return [
        f"N = {operands.n:x}",
        f"D = {operands.d:x}",
        f"Q = {result.q:x}",
        f"R = {result.r:x}",
    ]


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    match argv:
        case []:
            operands = Operands(DIVIDEND, DIVISOR)

        case [n, d]:
            try:
                operands = Operands(parse_hex(n), parse_hex(d))
            except ValueError as e:
                sys.stderr.write(f"Invalid operand: {e}\n")
                return 1

        case _:
            sys.stderr.write("Usage: udiv64 [<dividend> <divisor>]\n")
            return 1

    try:
        result = divide(operands)
    except ZeroDivisionError:
        sys.stderr.write("Division by zero\n")
        return 1

    for line in format_result(operands, result):
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
