from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Tuple

from .shamir import Share, combine, split


@dataclass(frozen=True)
class DemoConfig:
	secret: bytes = b"\x2a"
	n: int = 5
	k: int = 3
	subsets: Tuple[Tuple[int, ...], ...] = ((1, 3, 5), (2, 3, 4))


def _pick(by_id: Dict[int, Share], ids: Tuple[int, ...]) -> FrozenSet[Share]:
	return frozenset(by_id[i] for i in ids)


def run_demo(cfg: DemoConfig = DemoConfig()) -> None:
	logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
	log = logging.getLogger("scenario")

	shares = split(cfg.n, cfg.k, cfg.secret)
	if len(shares) != cfg.n:
		raise RuntimeError(f"expected {cfg.n} shares, got {len(shares)}")
	by_id = {share.id: share for share in shares}
	log.info("Split secret (len=%d) with Shamir (k=%d, n=%d)", len(cfg.secret), cfg.k, cfg.n)

	for ids in cfg.subsets:
		recovered = combine(_pick(by_id, ids))
		if recovered != cfg.secret:
			raise RuntimeError(f"shares {ids} did not reconstruct the secret")
		log.info("Reconstructed secret from shares %s (secret not logged)", ids)

	# one share short of the threshold: same length, unrelated value
	short = tuple(sorted(by_id))[: cfg.k - 1]
	recovered = combine(_pick(by_id, short))
	if len(recovered) != len(cfg.secret):
		raise RuntimeError("under-threshold combine changed the secret length")
	log.info("Combined %d shares below threshold: result is not the secret in general", len(short))


if __name__ == "__main__":
	run_demo()
