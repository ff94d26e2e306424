from pigment.conversions.gamma import (
    DECODING_GAMMA,
    ENCODING_GAMMA,
    gamma,
    np_gamma,
    create_gamma_function,
)
import math
import numpy as np
import pytest

def test_constants():
    assert DECODING_GAMMA == 2.2
    assert abs(ENCODING_GAMMA - 1 / 2.2) < 1e-15

def test_encoding_gamma_half():
    encode = create_gamma_function(1 / 2.2)
    assert abs(encode(0.5) - 0.7297) < 1e-4

def test_gamma_is_power_law():
    for value in (0.0, 0.1, 0.5, 1.0, 2.0):
        for factor in (ENCODING_GAMMA, DECODING_GAMMA, 1.0):
            assert abs(gamma(value, factor) - value ** factor) < 1e-12

def test_gamma_function_exposes_factor():
    fn = create_gamma_function(2.2)
    assert fn.factor == 2.2

def test_gamma_endpoints():
    fn = create_gamma_function(ENCODING_GAMMA)
    assert fn(0.0) == 0.0
    assert fn(1.0) == 1.0

def test_gamma_pins_negative_values():
    fn = create_gamma_function(ENCODING_GAMMA)
    assert fn(-0.5) == 0.0
    assert isinstance(fn(-0.5), float)

def test_gamma_inverse_pair():
    encode = create_gamma_function(ENCODING_GAMMA)
    decode = create_gamma_function(DECODING_GAMMA)
    for value in np.linspace(0.0, 1.0, 11):
        assert abs(decode(encode(float(value))) - value) < 1e-12

def test_gamma_function_accepts_arrays():
    fn = create_gamma_function(ENCODING_GAMMA)
    values = np.array([-1.0, 0.0, 0.25, 0.5, 1.0])
    result = fn(values)
    assert isinstance(result, np.ndarray)
    expected = [0.0, 0.0, 0.25 ** ENCODING_GAMMA, 0.5 ** ENCODING_GAMMA, 1.0]
    assert np.allclose(result, expected)
    assert np.allclose(np_gamma(values, ENCODING_GAMMA), expected)

@pytest.mark.parametrize("factor", [0.0, -2.2, math.inf, math.nan])
def test_invalid_factor(factor):
    with pytest.raises(ValueError):
        create_gamma_function(factor)

def test_scalar_and_numpy_agree_at_zero():
    for factor in (0.0, ENCODING_GAMMA, DECODING_GAMMA):
        assert gamma(0.0, factor) == float(np_gamma(np.array(0.0), factor))
    assert gamma(0.0, 0.0) == 1.0
    assert gamma(-0.5, 0.0) == 1.0
