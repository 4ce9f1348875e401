import pytest

from islandgen.fixed import Fixed, wrap_i32

def test_from_num_rounds_literals_to_nearest():
    assert Fixed.from_num(0.5).bits == 0x8000
    assert Fixed.from_num(0.9).bits == 58982
    assert Fixed.from_num(0.3).bits == 19661
    assert Fixed.from_num(1.1).bits == 72090
    assert Fixed.from_num(-1.3).bits == -85197
    assert Fixed.from_num(3) == Fixed.from_int(3)
    assert Fixed.from_int(-1).bits == -65536

def test_wrap_i32():
    assert wrap_i32(0x7FFFFFFF) == 0x7FFFFFFF
    assert wrap_i32(0x80000000) == -0x80000000
    assert wrap_i32(0x1_0000_0005) == 5

def test_add_sub_wrap_around():
    assert Fixed.MAX + Fixed.from_bits(1) == Fixed.MIN
    assert Fixed.MIN - Fixed.from_bits(1) == Fixed.MAX
    assert Fixed.from_num(0.25) + Fixed.from_num(0.5) == Fixed.from_num(0.75)

def test_mul_drops_low_bits_toward_negative_infinity():
    assert Fixed.from_num(1.5) * Fixed.from_num(2.0) == Fixed.from_int(3)
    assert (Fixed.from_bits(1) * Fixed.HALF).bits == 0
    assert (Fixed.from_bits(-1) * Fixed.HALF).bits == -1
    assert (Fixed.from_bits(3) * Fixed.HALF).bits == 1

def test_mul_keeps_only_low_32_bits():
    got = Fixed.from_int(200) * Fixed.from_int(200)
    assert got.bits == 40000 * 65536 - (1 << 32)

def test_mul_by_int():
    assert Fixed.from_num(0.75) * 4 == Fixed.from_int(3)
    assert 2 * Fixed.HALF == Fixed.ONE

def test_div_truncates_toward_zero():
    assert (Fixed.from_int(3) / Fixed.from_int(64)).bits == 3072
    assert Fixed.from_bits(-1) / Fixed.from_int(2) == Fixed.ZERO
    assert Fixed.from_bits(-3) / 2 == Fixed.from_bits(-1)
    with pytest.raises(ZeroDivisionError):
        Fixed.ONE / Fixed.ZERO

def test_abs_floor_to_int():
    assert abs(Fixed.from_num(-0.25)) == Fixed.from_num(0.25)
    assert abs(Fixed.MIN) == Fixed.MIN
    assert Fixed.from_num(2.75).floor() == Fixed.from_int(2)
    assert Fixed.from_num(-0.5).floor() == Fixed.from_int(-1)
    assert Fixed.from_num(2.75).to_int() == 2

def test_ordering_and_max():
    a, b = Fixed.from_num(0.3), Fixed.from_num(0.6)
    assert a < b and b > a and a <= a and b >= a
    assert max(a, b) is b
    assert Fixed.from_num(-1.3) < Fixed.ZERO
    assert len({Fixed.from_num(0.5), Fixed.HALF}) == 1
