"""Arithmetic in GF(256) modulo the Rijndael polynomial x^8 + x^4 + x^3 + x + 1.

Elements are ints in [0, 255]. Multiplication and division go through discrete-log
and exponential tables built once, at import, from the generator 0x03.
"""

from __future__ import annotations

from typing import Tuple

from .errors import DivisionByZero

POLYNOMIAL = 0x11B
GENERATOR = 0x03
ORDER = 255  # size of the multiplicative group


def _mul_slow(a: int, b: int) -> int:
	"""Carry-less multiply with reduction; only used to build the tables."""
	result = 0
	while b:
		if b & 1:
			result ^= a
		a <<= 1
		if a & 0x100:
			a ^= POLYNOMIAL
		b >>= 1
	return result


def _build_tables() -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
	exp = [0] * ORDER
	log = [0] * 256
	x = 1
	for i in range(ORDER):
		exp[i] = x
		log[x] = i
		x = _mul_slow(x, GENERATOR)
	return tuple(exp), tuple(log)


EXP, LOG = _build_tables()


def add(a: int, b: int) -> int:
	return a ^ b


def sub(a: int, b: int) -> int:
	return a ^ b


def mul(a: int, b: int) -> int:
	if a == 0 or b == 0:
		return 0
	return EXP[(LOG[a] + LOG[b]) % ORDER]


def div(a: int, b: int) -> int:
	"""Return a / b; raises DivisionByZero when b is the zero element."""
	if b == 0:
		raise DivisionByZero("division by zero in GF(256)")
	if a == 0:
		return 0
	return EXP[(LOG[a] - LOG[b] + ORDER) % ORDER]
