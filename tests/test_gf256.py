from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from gfshamir import gf256
from gfshamir.errors import DivisionByZero, ShamirError

nonzero = st.integers(min_value=1, max_value=255)
elements = st.integers(min_value=0, max_value=255)


def test_tables_are_immutable_and_complete():
	assert isinstance(gf256.EXP, tuple)
	assert isinstance(gf256.LOG, tuple)
	assert len(gf256.EXP) == 255
	assert len(gf256.LOG) == 256
	# the generator walks every non-zero element exactly once
	assert sorted(gf256.EXP) == list(range(1, 256))


def test_known_products():
	# FIPS-197 section 4.2 example and a known inverse pair
	assert gf256.mul(0x57, 0x83) == 0xC1
	assert gf256.mul(0x53, 0xCA) == 0x01
	assert gf256.EXP[1] == gf256.GENERATOR


def test_add_and_sub_are_xor():
	assert gf256.add(0x57, 0x83) == 0xD4
	assert gf256.sub(0x57, 0x83) == 0xD4
	assert gf256.add(0xAB, 0xAB) == 0


def test_mul_by_zero():
	assert gf256.mul(0, 0x57) == 0
	assert gf256.mul(0x57, 0) == 0


@pytest.mark.parametrize("a", range(1, 256))
def test_log_exp_roundtrip_and_self_division(a):
	assert gf256.mul(gf256.EXP[gf256.LOG[a]], 1) == a
	assert gf256.div(a, a) == 1


def test_div_zero_numerator():
	assert gf256.div(0, 7) == 0


@pytest.mark.parametrize("a", [0, 1, 0xFF])
def test_div_by_zero_fails(a):
	with pytest.raises(DivisionByZero):
		gf256.div(a, 0)


def test_division_by_zero_is_catchable_as_builtin():
	with pytest.raises(ZeroDivisionError):
		gf256.div(0, 0)
	with pytest.raises(ShamirError):
		gf256.div(0, 0)


@given(a=elements, b=nonzero)
def test_div_inverts_mul(a, b):
	assert gf256.div(gf256.mul(a, b), b) == a


@given(a=elements, b=elements, c=elements)
def test_mul_distributes_over_add(a, b, c):
	assert gf256.mul(a, gf256.add(b, c)) == gf256.add(gf256.mul(a, b), gf256.mul(a, c))
