from __future__ import annotations

from typing import Sequence, Tuple

from . import gf256, utils
from .errors import DuplicateCoordinate, ShamirError

Point = Tuple[int, int]


def generate(degree: int, constant: int, random_bytes: utils.RandomSource = utils.random_bytes) -> bytes:
	"""Return a random polynomial of the given degree with p(0) == constant.

	Coefficients are stored low-to-high: poly[0] is the constant term and
	poly[1:] come from a single ``random_bytes(degree)`` call.
	"""
	if degree < 0:
		raise ValueError("degree must be >= 0")
	if degree == 0:
		return bytes([constant])

	coeffs = random_bytes(degree)
	if not utils.is_bytes_like(coeffs):
		raise ShamirError("random source must return bytes")
	if len(coeffs) != degree:
		raise ShamirError(f"random source returned {len(coeffs)} bytes, expected {degree}")
	return bytes([constant]) + bytes(coeffs)


def evaluate(poly: Sequence[int], x: int) -> int:
	"""Evaluate poly at x with Horner's method."""
	result = 0
	for coeff in reversed(poly):
		result = gf256.add(gf256.mul(result, x), coeff)
	return result


def interpolate(points: Sequence[Point]) -> int:
	"""Return y at x=0 of the Lagrange polynomial through ``points``.

	Raises DuplicateCoordinate if two points share an x-coordinate.
	"""
	if not points:
		raise ValueError("at least one point is required")

	value = 0
	for i, (xi, yi) in enumerate(points):
		basis = 1
		for j, (xj, _) in enumerate(points):
			if i == j:
				continue
			denominator = gf256.sub(xj, xi)
			if denominator == 0:
				raise DuplicateCoordinate(f"duplicate x-coordinate {xi}")
			basis = gf256.mul(basis, gf256.div(xj, denominator))
		value = gf256.add(value, gf256.mul(yi, basis))
	return value
