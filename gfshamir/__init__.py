"""Shamir's Secret Sharing over GF(256)."""

from .errors import (
	DivisionByZero,
	DuplicateCoordinate,
	EmptyShareSet,
	InconsistentShareLength,
	InsufficientShareCount,
	InsufficientShares,
	InvalidThreshold,
	ShamirError,
	TooManyShares,
)
from .shamir import Scheme, Share, combine, split

__all__ = [
	"DivisionByZero",
	"DuplicateCoordinate",
	"EmptyShareSet",
	"InconsistentShareLength",
	"InsufficientShareCount",
	"InsufficientShares",
	"InvalidThreshold",
	"Scheme",
	"ShamirError",
	"Share",
	"TooManyShares",
	"combine",
	"split",
]
