import pytest
from okchroma import Palette


@pytest.fixture
def scenario_palette():
    """Five samples at L=0.6 up toward chroma 0.3 along +b."""
    return Palette(5, luminance=0.6, max_chroma=0.3, hue_angle=0.0)
