from __future__ import annotations


class ShamirError(Exception):
	"""Raised on Shamir split/combine failures."""


class InvalidThreshold(ShamirError, ValueError):
	"""The threshold K is not greater than 1."""


class InsufficientShareCount(ShamirError, ValueError):
	"""Fewer shares were requested than the threshold."""


class TooManyShares(ShamirError, ValueError):
	"""More shares were requested than there are non-zero field elements."""


class EmptyShareSet(ShamirError, ValueError):
	"""No shares were provided to combine."""


class InconsistentShareLength(ShamirError, ValueError):
	"""Shares passed to combine have values of differing lengths."""


class DuplicateCoordinate(ShamirError, ValueError):
	"""Two interpolation points share an x-coordinate."""


class InsufficientShares(ShamirError, ValueError):
	"""Strict combine was given fewer shares than the expected threshold."""


class DivisionByZero(ShamirError, ZeroDivisionError):
	"""Division by the zero element of GF(256)."""
