#!/usr/bin/env python3

"""
Checks the division against z3's unsigned bit-vector semantics.

First the fixed operands are evaluated with UDiv/URem and compared with the
numpy result, then z3 looks for a dividend and a non-zero divisor of the given
width for which the quotient and remainder break N = Q * D + R or R < D.
"""

import sys

import z3

from z3 import ULT, UDiv, URem, BitVec, BitVecVal, ZeroExt

from .div import DIVIDEND, DIVISOR, Operands, divide

WIDTH = 16


def check_operands(operands):
    expected = divide(operands)

    n = BitVecVal(operands.n, 64)
    d = BitVecVal(operands.d, 64)
    q = z3.simplify(UDiv(n, d)).as_long()
    r = z3.simplify(URem(n, d)).as_long()

    return (q, r) == (expected.q, expected.r)


def find_counterexample(width=WIDTH):
    n = BitVec("n", width)
    d = BitVec("d", width)
    q = UDiv(n, d)
    r = URem(n, d)

    # widen so that q * d + r cannot wrap around
    identity = (
        ZeroExt(width, q) * ZeroExt(width, d) + ZeroExt(width, r)
        == ZeroExt(width, n)
    )

    solver = z3.Solver()
    solver.add(d != BitVecVal(0, width))
    solver.add(z3.Not(z3.And(identity, ULT(r, d))))

    match solver.check():
        case z3.sat:
            return solver.model()

        case z3.unsat:
            return None

        case _:
            raise RuntimeError(f"z3 gave up: {solver.reason_unknown()}")


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    width = WIDTH

    if len(argv) > 1:
        sys.stderr.write("Usage: udiv64-verify [width]\n")
        return 1

    if argv:
        try:
            width = int(argv[0])
        except ValueError:
            width = 0

        if not 1 <= width <= 64:
            sys.stderr.write(f"Invalid width: {argv[0]}\n")
            return 1

    operands = Operands(DIVIDEND, DIVISOR)

    if not check_operands(operands):
        sys.stderr.write(
            f"Mismatch for 0x{operands.n:x} / 0x{operands.d:x}\n"
        )
        return 1

    print(f"ok: 0x{operands.n:x} / 0x{operands.d:x}")

    model = find_counterexample(width)

    if model is not None:
        sys.stderr.write(f"Counterexample at {width} bits: {model}\n")
        return 1

    print(f"ok: no counterexample at {width} bits")

    return 0


if __name__ == "__main__":
    sys.exit(main())
