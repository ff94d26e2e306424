from pigment.color_spaces import ScreenColorSpace
from pigment.colors import EmissiveColor
from pigment.conversions.gamma import create_gamma_function
import numpy as np
import pytest

def test_encode_half_grey():
    encoded = ScreenColorSpace().encode(EmissiveColor(0.5, 0.5, 0.5))
    for channel in encoded:
        assert abs(channel - 0.7297) < 1e-4

def test_encode_returns_new_record():
    color = EmissiveColor(0.5, 0.5, 0.5)
    encoded = ScreenColorSpace().encode(color)
    assert encoded is not color
    assert color == EmissiveColor(0.5, 0.5, 0.5)

def test_round_trip():
    space = ScreenColorSpace()
    for value in np.linspace(0.0, 1.0, 21):
        color = EmissiveColor(float(value), 1.0 - float(value), 0.5 * float(value))
        decoded = space.decode(space.encode(color))
        for a, b in zip(decoded, color):
            assert abs(a - b) < 1e-9

def test_over_bright_clamps_flat():
    space = ScreenColorSpace()
    assert space.encode(EmissiveColor(2.0, 0.0, 0.0)) == space.encode(EmissiveColor(1.0, 0.0, 0.0))
    assert space.encode(EmissiveColor(2.0, 0.0, 0.0)) == EmissiveColor(1.0, 0.0, 0.0)

def test_negative_clamps_to_zero():
    space = ScreenColorSpace()
    assert space.encode(EmissiveColor(-0.5, 0.0, 0.25)).red == 0.0
    assert space.decode(EmissiveColor(-0.5, 0.0, 0.25)).red == 0.0

def test_custom_gamma_functions():
    identity = ScreenColorSpace(encode_gamma=lambda v: v, decode_gamma=lambda v: v)
    assert identity.encode(EmissiveColor(0.25, 0.5, 2.0)) == EmissiveColor(0.25, 0.5, 1.0)

def test_gamma_factors():
    space = ScreenColorSpace(encode_gamma=0.5, decode_gamma=2.0)
    encoded = space.encode(EmissiveColor(0.25, 0.0, 1.0))
    assert encoded == EmissiveColor(0.5, 0.0, 1.0)
    assert space.decode(encoded) == EmissiveColor(0.25, 0.0, 1.0)

def test_mixed_gamma_arguments():
    space = ScreenColorSpace(encode_gamma=create_gamma_function(0.5))
    assert space.encode(EmissiveColor(0.25, 0.25, 0.25)) == EmissiveColor(0.5, 0.5, 0.5)
    # decode falls back to 2.2
    assert abs(space.decode(EmissiveColor(0.5, 0.5, 0.5)).red - 0.5 ** 2.2) < 1e-12

def test_non_reciprocal_factors_warn():
    with pytest.warns(UserWarning, match="not reciprocal"):
        ScreenColorSpace(encode_gamma=0.5, decode_gamma=2.2)

def test_bad_gamma_type():
    with pytest.raises(TypeError):
        ScreenColorSpace(encode_gamma="srgb")

def test_bad_gamma_factor():
    with pytest.raises(ValueError):
        ScreenColorSpace(decode_gamma=-1.0)

def test_immutable():
    space = ScreenColorSpace()
    with pytest.raises(AttributeError):
        space.encode_gamma = lambda v: v

def test_array_matches_scalar():
    space = ScreenColorSpace()
    arr = np.array([[0.5, 0.5, 0.5], [2.0, -1.0, 0.1], [0.0, 1.0, 0.75]])
    batch = space.encode(EmissiveColor.from_array(arr))
    expected = [space.encode(EmissiveColor(*row)).as_tuple() for row in arr]
    assert batch.is_array
    assert np.allclose(batch.to_array(), expected)
    decoded = space.decode(batch)
    assert np.allclose(decoded.to_array(), [space.decode(EmissiveColor(*row)).as_tuple() for row in expected])
