from pigment.color_spaces import HsvColorSpace
from pigment.colors import EmissiveColor, HsvColor
import numpy as np
from ..samples import samples_hsv_rgb

def test_red():
    space = HsvColorSpace()
    assert space.encode(HsvColor(0, 1, 1)) == EmissiveColor(1.0, 0.0, 0.0)
    assert space.decode(EmissiveColor(1.0, 0.0, 0.0)) == HsvColor(0, 1, 1)

def test_green_and_blue_hues():
    space = HsvColorSpace()
    assert space.decode(EmissiveColor(0.0, 1.0, 0.0)).hue == 120.0
    assert space.decode(EmissiveColor(0.0, 0.0, 1.0)).hue == 240.0

def test_round_trip():
    space = HsvColorSpace()
    for hsv in samples_hsv_rgb:
        decoded = space.decode(space.encode(HsvColor(*hsv)))
        assert np.allclose(decoded.as_tuple(), hsv, atol=1e-9)

def test_hue_wraps():
    space = HsvColorSpace()
    assert np.allclose(
        space.encode(HsvColor(400.0, 0.5, 0.8)).as_tuple(),
        space.encode(HsvColor(40.0, 0.5, 0.8)).as_tuple(),
    )
    decoded = space.decode(space.encode(HsvColor(-60.0, 1.0, 1.0)))
    assert abs(decoded.hue - 300.0) < 1e-9

def test_achromatic_loses_hue():
    space = HsvColorSpace()
    assert space.decode(space.encode(HsvColor(200.0, 0.0, 0.6))).hue == 0.0
    assert space.decode(space.encode(HsvColor(200.0, 0.7, 0.0))) == HsvColor(0.0, 0.0, 0.0)

def test_array_matches_scalar():
    space = HsvColorSpace()
    arr = np.array(list(samples_hsv_rgb.keys()) + [(200.0, 0.0, 0.6), (-90.0, 2.0, 0.5)])
    batch = space.encode(HsvColor.from_array(arr))
    expected = [space.encode(HsvColor(*row)).as_tuple() for row in arr]
    assert np.allclose(batch.to_array(), expected)

    decoded = space.decode(batch)
    assert np.allclose(decoded.to_array(), [space.decode(EmissiveColor(*row)).as_tuple() for row in expected])
