# plotstyle

Style primitives for drawing charts: colors, accessible palettes, sizes
relative to a parent area, font descriptions and text styles. The package
has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Colors and shape styles

`plotstyle.color` holds `RGBColor`, `RGBAColor` and `HSLColor`, all frozen
dataclasses sharing the `Color` base, plus the constants `WHITE`, `BLACK`,
`RED`, `GREEN`, `BLUE`, `YELLOW`, `CYAN`, `MAGENTA` and `TRANSPARENT`.
Every color normalizes to a `BackendColor` (an RGB triple and an alpha).

```python
from plotstyle.color import RGBColor, HSLColor, ShapeStyle

red = RGBColor(255, 0, 0)
faded = red.mix(0.5)               # RGBAColor with alpha 0.5
style = red.stroke_width(3)        # ShapeStyle, not filled
solid = red.filled()               # ShapeStyle, filled

HSLColor(0.0, 1.0, 0.5).rgb()      # (255, 0, 0)
ShapeStyle.from_color(red).as_filled()
```

HSL components are clamped to `[0, 1]`.

## Palettes

`plotstyle.palette` provides `Palette99`, `Palette9999` and `Palette100`.

```python
from plotstyle.palette import Palette99, PaletteColor

Palette99.pick(0).rgb()            # (230, 25, 75)
PaletteColor.pick(Palette99, 21)   # indices wrap around the palette
```

A negative index raises `ValueError`.

## Relative sizes

```python
from plotstyle.size import percent, percent_height, percent_width, in_pixels

percent_height(10).in_pixels((100, 200))          # 20
percent_width(10).min(30).in_pixels((100, 200))   # 30
percent(10).in_pixels((400, 200))                 # 20, of the smaller side
in_pixels(12, (100, 200))                         # plain numbers are pixels
```

A parent is either a `(width, height)` pair or any object with a `dim()`
method returning one.

## Fonts and text styles

```python
from plotstyle.font import FontTransform, into_font
from plotstyle.text import TextStyle, into_text_style, with_color
from plotstyle.color import RGBColor

font = into_font(("sans-serif", 20))
font.layout_box("hello")           # estimated ((x0, y0), (x1, y1))
font.with_transform(FontTransform.ROTATE90).box_size("hello")

style = TextStyle.from_font(font).with_color(RGBColor(0, 0, 255))
into_text_style(("serif", 10), (400, 300))
with_color("sans-serif", RGBColor(255, 0, 0)).into_text_style((400, 300))
```

## What it does not do

Text layout is only estimated from the font size and the text length; no
font files are read. There are no glyphs, so `FontDesc.draw` and
`TextStyle.draw` raise `FontError` rather than rendering anything. The
package draws no charts and has no image or vector output of its own.

## Running the tests

```
pip install .[test]
pytest
```