from __future__ import annotations

import secrets
from typing import Callable

# Signature of an injectable random source: length -> that many random bytes.
RandomSource = Callable[[int], bytes]


def random_bytes(length: int) -> bytes:
	"""Return cryptographically secure random bytes."""
	if length <= 0:
		raise ValueError("length must be > 0")
	return secrets.token_bytes(length)


def is_bytes_like(data: object) -> bool:
	return isinstance(data, (bytes, bytearray, memoryview))
