from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, FrozenSet, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import polynomial, utils
from .errors import (
	EmptyShareSet,
	InconsistentShareLength,
	InsufficientShareCount,
	InsufficientShares,
	InvalidThreshold,
	TooManyShares,
)

log = logging.getLogger(__name__)

MIN_SHARE_ID = 1
MAX_SHARE_ID = 255


class Share(BaseModel):
	"""One (id, value) output of ``split``.

	``id`` is the x-coordinate the share was evaluated at; x=0 is the secret
	itself and is never handed out. Equality and hashing are structural.
	"""

	model_config = ConfigDict(frozen=True)

	id: int = Field(..., ge=MIN_SHARE_ID, le=MAX_SHARE_ID)
	value: bytes

	@field_validator("value", mode="before")
	@classmethod
	def _coerce_value(cls, v: Any) -> bytes:
		if not utils.is_bytes_like(v):
			raise ValueError("value must be bytes")
		return bytes(v)


def _check_threshold(k: int) -> None:
	if k <= 1:
		raise InvalidThreshold("K must be > 1")


def _check_parameters(n: int, k: int) -> None:
	_check_threshold(k)
	if n < k:
		raise InsufficientShareCount("N must be >= K")
	if n > MAX_SHARE_ID:
		raise TooManyShares(f"N must be <= {MAX_SHARE_ID}")


def split(
	n: int,
	k: int,
	secret: bytes,
	*,
	random_bytes: utils.RandomSource = utils.random_bytes,
) -> FrozenSet[Share]:
	"""Split ``secret`` into ``n`` shares, any ``k`` of which recover it.

	Draws exactly ``len(secret) * (k - 1)`` bytes from ``random_bytes``.
	The result is unordered; look shares up by ``Share.id``.
	"""
	_check_parameters(n, k)
	if not utils.is_bytes_like(secret):
		raise TypeError("secret must be bytes")
	secret = bytes(secret)

	values = [bytearray(len(secret)) for _ in range(n)]
	for i, b in enumerate(secret):
		# fresh polynomial per byte, p(0) == secret byte
		p = polynomial.generate(k - 1, b, random_bytes)
		for x in range(1, n + 1):
			values[x - 1][i] = polynomial.evaluate(p, x)

	shares = frozenset(Share(id=x, value=bytes(v)) for x, v in enumerate(values, start=1))
	log.debug("Split secret (len=%d) into %d shares, threshold %d", len(secret), len(shares), k)
	return shares


def combine(shares: Iterable[Share], *, threshold: Optional[int] = None) -> bytes:
	"""Combine shares into the original secret.

	There is no way to tell whether the result is the original secret: with
	incorrect shares, or fewer than the threshold used to split, a random
	value of the same length comes back. Pass ``threshold`` to refuse to
	combine fewer shares than that.
	"""
	provided: List[Share] = list(shares)
	for share in provided:
		if not isinstance(share, Share):
			raise TypeError("shares must be Share instances")

	lengths = {len(share.value) for share in provided}
	if not lengths:
		raise EmptyShareSet("no shares provided")
	if len(lengths) != 1:
		raise InconsistentShareLength("varying lengths of share values")
	if threshold is not None:
		_check_threshold(threshold)
		if len(provided) < threshold:
			raise InsufficientShares(f"{len(provided)} shares provided, threshold is {threshold}")

	length = lengths.pop()
	secret = bytearray(length)
	for i in range(length):
		points = [(share.id, share.value[i]) for share in provided]
		secret[i] = polynomial.interpolate(points)

	log.debug("Combined %d shares into secret (len=%d)", len(provided), length)
	return bytes(secret)


@dataclass(frozen=True)
class Scheme:
	"""A fixed (n, k) sharing configuration.

	``combine`` here is the strict variant: it refuses fewer than ``k`` shares.
	"""

	n: int
	k: int
	random_bytes: utils.RandomSource = field(default=utils.random_bytes, repr=False, compare=False)

	def __post_init__(self) -> None:
		_check_parameters(self.n, self.k)

	def split(self, secret: bytes) -> FrozenSet[Share]:
		return split(self.n, self.k, secret, random_bytes=self.random_bytes)

	def combine(self, shares: Iterable[Share]) -> bytes:
		return combine(shares, threshold=self.k)
