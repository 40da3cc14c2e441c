import math
import warnings
import numpy as np
import pytest
from boundednumbers import BoundType
from okchroma import Palette, PaletteParameters, PerceptualColor, LinearColor, DisplayColor, generate_samples
from tests.samples import palette_parameter_samples


def _angle_distance(x: float, y: float) -> float:
    d = (x - y) % (2 * math.pi)
    return min(d, 2 * math.pi - d)


def test_scenario_values(scenario_palette):
    assert len(scenario_palette) == 5
    assert [c.a for c in scenario_palette] == [0.0, 0.0, 0.0, 0.0, 0.0]
    assert [c.b for c in scenario_palette] == pytest.approx([0.0, 0.06, 0.12, 0.18, 0.24])
    assert all(c.L == 0.6 for c in scenario_palette)


def test_first_sample_is_gray():
    for count, luminance, max_chroma, hue_angle in palette_parameter_samples:
        palette = Palette(count, luminance, max_chroma, hue_angle)
        assert palette[0] == PerceptualColor(luminance, 0.0, 0.0)


def test_last_sample_stops_short_of_max_chroma():
    palette = Palette(4, 0.5, 0.2, 1.0)
    assert palette[3].chroma == pytest.approx(0.15)
    assert all(c.chroma < 0.2 for c in palette)


def test_length_matches_count():
    for params in palette_parameter_samples:
        palette = Palette(*params)
        assert len(palette) == palette.count == len(palette.samples)


def test_chroma_strictly_increases():
    for count, luminance, max_chroma, hue_angle in palette_parameter_samples:
        chroma = [c.chroma for c in Palette(count, luminance, max_chroma, hue_angle)]
        if max_chroma > 0:
            assert all(b > a for a, b in zip(chroma, chroma[1:]))
        else:
            assert all(c == 0.0 for c in chroma)


def test_hue_is_shared_by_every_sample():
    for count, luminance, max_chroma, hue_angle in palette_parameter_samples:
        for c in Palette(count, luminance, max_chroma, hue_angle):
            if c.chroma > 0:
                assert _angle_distance(math.atan2(c.a, c.b), hue_angle) < 1e-9


def test_lightness_is_constant():
    palette = Palette(10, 0.42, 0.2, 2.5)
    assert {c.L for c in palette} == {0.42}


def test_setters_regenerate(scenario_palette):
    palette = scenario_palette

    palette.count = 8
    assert len(palette) == 8
    assert palette[1].b == pytest.approx(0.3 / 8)

    palette.luminance = 0.3
    assert all(c.L == 0.3 for c in palette)

    palette.max_chroma = 0.16
    assert palette[4].chroma == pytest.approx(0.08)

    palette.hue_angle = math.pi / 2
    assert palette[4].a == pytest.approx(0.08)
    assert abs(palette[4].b) < 1e-12

    assert palette.parameters == PaletteParameters(8, 0.3, 0.16, math.pi / 2)
    assert len(palette) == palette.count


def test_update_sets_several_parameters(scenario_palette):
    scenario_palette.update(count=3, hue_angle=math.pi)
    assert scenario_palette.parameters == PaletteParameters(3, 0.6, 0.3, math.pi)
    assert len(scenario_palette) == 3
    assert scenario_palette[1].b == pytest.approx(-0.1)


def test_update_matches_fresh_palette():
    palette = Palette(3, 0.5, 0.1, 0.0)
    palette.update(count=9, luminance=0.7, max_chroma=0.2, hue_angle=1.3)
    assert palette == Palette(9, 0.7, 0.2, 1.3)


def test_invalid_parameters_leave_palette_untouched(scenario_palette):
    before = scenario_palette.samples
    with pytest.raises(ValueError):
        scenario_palette.update(luminance=0.1, count=-1)
    with pytest.raises(TypeError):
        scenario_palette.count = 2.5  # type: ignore[assignment]
    with pytest.raises(TypeError):
        scenario_palette.hue_angle = "north"  # type: ignore[assignment]
    assert scenario_palette.parameters == PaletteParameters(5, 0.6, 0.3, 0.0)
    assert scenario_palette.samples == before


def test_constructor_validation():
    with pytest.raises(ValueError):
        Palette(-1, 0.5, 0.1, 0.0)
    with pytest.raises(TypeError):
        Palette(3.0, 0.5, 0.1, 0.0)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Palette(True, 0.5, 0.1, 0.0)
    with pytest.raises(TypeError):
        Palette(3, None, 0.1, 0.0)  # type: ignore[arg-type]


def test_empty_palette():
    palette = Palette(0, 0.5, 0.1, 0.0)
    assert len(palette) == 0
    assert list(palette) == []
    assert palette.to_display() == []
    assert palette.to_array().shape == (0, 3)
    with pytest.raises(IndexError):
        palette[0]


def test_index_out_of_range(scenario_palette):
    with pytest.raises(IndexError):
        scenario_palette[5]
    with pytest.raises(IndexError):
        scenario_palette.get(-1)
    with pytest.raises(IndexError):
        scenario_palette[5] = PerceptualColor(0.5, 0.0, 0.0)
    with pytest.raises(TypeError):
        scenario_palette[1.0]  # type: ignore[index]
    with pytest.raises(TypeError):
        scenario_palette[0:2]  # type: ignore[index]


def test_get_accepts_numpy_integers(scenario_palette):
    assert scenario_palette[np.int64(2)] == scenario_palette.get(2)


def test_set_overwrites_one_sample(scenario_palette):
    original = scenario_palette.samples
    replacement = PerceptualColor(0.9, 0.01, 0.02)
    scenario_palette[2] = replacement

    assert scenario_palette[2] == replacement
    assert [scenario_palette[i] for i in (0, 1, 3, 4)] == [original[i] for i in (0, 1, 3, 4)]
    assert scenario_palette.parameters == PaletteParameters(5, 0.6, 0.3, 0.0)
    assert len(scenario_palette) == scenario_palette.count


def test_set_is_discarded_on_regeneration(scenario_palette):
    original = scenario_palette.samples
    scenario_palette.set(1, PerceptualColor(0.1, 0.1, 0.1))
    scenario_palette.regenerate()
    assert scenario_palette.samples == original

    scenario_palette.set(1, PerceptualColor(0.1, 0.1, 0.1))
    scenario_palette.luminance = 0.6
    assert scenario_palette.samples == original


def test_set_rejects_other_types(scenario_palette):
    with pytest.raises(TypeError):
        scenario_palette[0] = LinearColor(0.5, 0.5, 0.5)  # type: ignore[assignment]
    with pytest.raises(TypeError):
        scenario_palette[0] = (0.5, 0.0, 0.0)  # type: ignore[assignment]


def test_iteration_is_restartable(scenario_palette):
    assert list(scenario_palette) == list(scenario_palette)
    assert list(scenario_palette) == list(scenario_palette.samples)


def test_iteration_sees_snapshot(scenario_palette):
    original = scenario_palette.samples
    it = iter(scenario_palette)
    first = next(it)
    scenario_palette[3] = PerceptualColor(0.0, 0.0, 0.0)
    scenario_palette.count = 2
    rest = list(it)
    assert [first] + rest == list(original)


def test_samples_is_a_snapshot(scenario_palette):
    snapshot = scenario_palette.samples
    assert isinstance(snapshot, tuple)
    scenario_palette.count = 7
    assert len(snapshot) == 5


def test_generate_samples_matches_palette():
    assert generate_samples(5, 0.6, 0.3, 0.0) == list(Palette(5, 0.6, 0.3, 0.0))
    assert generate_samples(0, 0.6, 0.3, 0.0) == []


def test_to_array_and_to_linear(scenario_palette):
    arr = scenario_palette.to_array()
    assert arr.shape == (5, 3)
    np.testing.assert_allclose(arr[:, 2], [0.0, 0.06, 0.12, 0.18, 0.24])

    linear = scenario_palette.to_linear()
    assert all(isinstance(c, LinearColor) for c in linear)
    for c, lab in zip(linear, scenario_palette):
        assert c.value == pytest.approx(lab.to_linear().value, abs=1e-12)


def test_to_display_in_gamut_has_no_warning():
    palette = Palette(6, 0.6, 0.05, 1.0)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        colors = palette.to_display()
    assert len(colors) == 6
    assert all(isinstance(c, DisplayColor) for c in colors)
    assert colors == [c.to_display() for c in palette]


def test_to_display_warns_when_bounding():
    palette = Palette(4, 0.6, 0.6, 0.0)
    with pytest.warns(UserWarning):
        colors = palette.to_display()
    assert all(0 <= ch <= 255 for c in colors for ch in c)
    # gray sample is unaffected
    assert colors[0] == palette[0].to_display()


def test_to_display_reject_policy_raises_without_warning():
    palette = Palette(4, 0.6, 0.6, 0.0)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        with pytest.raises(ValueError):
            palette.to_display(BoundType.IGNORE)


def test_equality_and_repr(scenario_palette):
    assert scenario_palette == Palette(5, 0.6, 0.3, 0.0)
    assert scenario_palette != Palette(5, 0.6, 0.3, 0.1)
    edited = Palette(5, 0.6, 0.3, 0.0)
    edited[0] = PerceptualColor(0.6, 0.0, 0.01)
    assert scenario_palette != edited
    assert repr(scenario_palette) == "Palette(count=5, luminance=0.6, max_chroma=0.3, hue_angle=0.0)"
