from __future__ import annotations

import logging

from gfshamir.scenario import DemoConfig, run_demo


def test_run_demo_default(caplog):
	caplog.set_level(logging.INFO, logger="scenario")
	run_demo()
	assert "Reconstructed secret from shares (1, 3, 5)" in caplog.text
	assert "Reconstructed secret from shares (2, 3, 4)" in caplog.text
	assert "below threshold" in caplog.text


def test_run_demo_custom_config(caplog):
	caplog.set_level(logging.INFO, logger="scenario")
	cfg = DemoConfig(secret=b"a longer secret", n=4, k=2, subsets=((1, 4), (2, 3)))
	run_demo(cfg)
	assert "Split secret (len=15) with Shamir (k=2, n=4)" in caplog.text
