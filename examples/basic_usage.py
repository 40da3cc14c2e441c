"""Basic okchroma usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import math
from PIL import Image

from okchroma import (
    LinearColor,
    Palette,
    PerceptualColor,
    BoundType,
    convert,
)

SWATCH_SIZE = 48


def demonstrate_colors() -> None:
    # Explicit conversions between the three representations.
    accent = LinearColor.from_bytes(255, 128, 64)
    lab = accent.to_perceptual()
    print("Linear:", accent)
    print("OkLab:", lab)
    print("Back to display:", lab.to_display())

    # Out-of-gamut colors keep their linear values until quantization.
    vivid = PerceptualColor(0.7, 0.35, 0.0)
    print("Vivid linear:", vivid.to_linear())
    print("Clamped:", vivid.to_display())
    print("Bounced:", vivid.to_display(BoundType.BOUNCE))

    print("convert():", convert((0.6, 0.0, 0.12), "oklab", "display"))


def render_swatches(palette: Palette, path: str) -> None:
    # One square per sample, left to right.
    image = Image.new("RGB", (SWATCH_SIZE * max(len(palette), 1), SWATCH_SIZE))
    for i, color in enumerate(palette.to_display()):
        image.paste(color[:3], (i * SWATCH_SIZE, 0, (i + 1) * SWATCH_SIZE, SWATCH_SIZE))
    image.save(path)


def demonstrate_palettes() -> None:
    palette = Palette(8, luminance=0.65, max_chroma=0.16, hue_angle=math.radians(30))
    print("Palette:", palette)
    render_swatches(palette, "palette_warm.png")

    # Change several parameters with a single rebuild.
    palette.update(luminance=0.5, hue_angle=math.radians(210))
    render_swatches(palette, "palette_cool.png")


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_palettes()
