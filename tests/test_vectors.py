import re

from udiv64.vectors import N, generate, main, random_operands

LINE = re.compile(r"^0x[0-9a-f]+ 0x[0-9a-f]+ 0x[0-9a-f]+ 0x[0-9a-f]+$")


def test_random_operands_in_range(rng):
    for _ in range(1000):
        dividend, divisor = random_operands(rng)
        assert 0 <= dividend < 1 << 64
        assert 0 < divisor < 1 << 64


def test_divisor_widths_vary(rng):
    widths = {random_operands(rng)[1].bit_length() for _ in range(2000)}
    assert 1 in widths
    assert 64 in widths
    assert len(widths) > 32


def test_generate(rng):
    vectors = list(generate(100, rng))
    assert len(vectors) == 100

    for n, d, q, r in vectors:
        assert n == q * d + r
        assert 0 <= r < d


def test_main_default_count(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == N
    assert all(LINE.match(line) for line in lines)


def test_main_count(capsys):
    assert main(["3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3

    for line in lines:
        n, d, q, r = (int(x, 16) for x in line.split())
        assert n == q * d + r


def test_main_invalid(capsys):
    assert main(["many"]) == 1
    assert "Invalid count" in capsys.readouterr().err
    assert main(["-5"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid count" in captured.err
    assert main(["1", "2"]) == 1
    assert "Usage" in capsys.readouterr().err
