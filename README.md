# retrovram

`retrovram` reads MSX SCREEN 5 images (BLOAD files with a 7-byte header,
then 256×212 pixels, 16 colours, two pixels per byte) and lays them out the
way other retro computers expect to find them in video memory. It also holds
a few small tools from the same hobby: a model of the MSX2 VDP register
interface, a joystick and keyboard-matrix decoder, a falling-star animation
and a converter for binary files.

No hardware is touched. The functions return plain Python data such as
bytes, bytearrays, lists of integers or lists of `(port, value)` writes,
which you can save, feed to an emulator or check in tests.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Reading images

```python
from retrovram.bitplanes import load_sc5, nibbles, double_width, pack_planes

data = load_sc5("PICTURE.SC5")  # pixel bytes, header skipped
```

In `retrovram.bitplanes`:

- `read_sc5(stream)` does the same for an open binary stream.
- `nibbles(data)` yields the 4-bit colour indices, high nibble first.
- `double_width(data)` returns the indices with every pixel repeated twice.
- `pack_planes(colors, planes, table)` packs eight colour indices into one
  byte per plane, leftmost pixel in bit 7, through a colour table (the
  identity by default). It raises `ValueError` for anything but 8 pixels.
- `PlaneBuffer(count, size)` holds `count` bytearrays of `size` bytes in
  `.planes`. `PlaneBuffer.clear(value)` fills them.
- `MSX_PALETTE` and `DIGITAL_PALETTE` are 16-entry `(r, g, b)` palettes.
  `IDENTITY_TABLE` and `DIGITAL_TABLE` are the colour tables.

## Target machines

Each module renders the same image data for one machine. It also gives the
palette writes for that machine.

| Module | Functions |
| --- | --- |
| `retrovram.pc98` | `render(data, digital)`, `palette_writes(palette)` |
| `retrovram.pcat` | `render(data, digital)`, `dac_level(level)`, `palette_writes(palette)` |
| `retrovram.pc88va` | `render(data, digital)`, `palette_word(red, green, blue)`, `palette_writes(palette)` |
| `retrovram.x68k` | `render_planes(data)`, `render_16(data)`, `render_65536(data)`, `scale_level(level)`, `color_word(red, green, blue)`, `palette_writes(palette)` |
| `retrovram.towns` | `render_16(data)`, `render_32768(data)`, `color_32768(red, green, blue)`, `palette_writes(palette)` |

What each module produces:

- **PC-98** (`pc98.render`): four 80×400 planes. The first 200 lines of the
  image are used, doubled in both directions.
- **PC/AT** (`pcat.render`): four 80×480 VGA planes. All 212 lines are used,
  doubled in both directions.
- **PC-88VA** (`pc88va.render`): four 80×200 planes. The image is doubled
  across only.
- **X68000**, three layouts:
  - `x68k.render_planes` gives the four text planes.
  - `x68k.render_16` gives palette indices on a 512-word-wide page.
  - `x68k.render_65536` gives direct colour words from the MSX palette.
  - `x68k.palette_writes` gives `(offset, word)` pairs counted from
    `TEXT_PALETTE` or `GRAPHIC_PALETTE`.
- **FM TOWNS**, two layouts:
  - `towns.render_16` gives a 4-bit page with the leftmost pixel in the low
    nibble.
  - `towns.render_32768` gives 15-bit colour words.

For the PC-98, PC/AT and PC-88VA, `digital=True` maps the MSX colours onto
the 8-colour digital table and leaves plane 3 empty. `digital=False` keeps
all 16 colours.

## Sprites

`retrovram.sprites`:

- `x68k_pcg(data)` cuts an image into X68000 PCG patterns. `towns_sprites(data)`
  cuts it into FM TOWNS sprite patterns. Both return 256 patterns of 16×16
  pixels as lists of 16-bit words.
- `x68k_sprite_entries(count)` and `towns_sprite_entries(count)` return
  `SpriteEntry(x, y, code, attribute)` tuples that lay the sprites out 16 to
  a row.

`retrovram.vasprite`:

- `sprite_size(width, height)` gives the pattern size in bytes of a PC-88VA
  sprite.
- `pack_sprite_patterns(data, width, line, sprite_width, sprite_height, columns, rows, compact)`
  packs an image into sprite pattern memory and doubles every pixel across.
  It returns `SpritePatterns(patterns, end)`.
- `sprite_attribute(address, x, y, width, height)` builds the 8-byte sprite
  control entry.

## MSX2 helpers

`retrovram.vdp.Vdp` issues V9938 port writes. It records them in `.writes`
and keeps the last value of each register in `.registers`. Optional
`port_out` and `port_in` callables receive the writes and answer the reads.
Its methods:

- `write_register` sets a control register.
- `set_vram_address` and `write_data` address VRAM and write to it.
- `set_screen5` and `set_screen1` switch the screen mode.
- `set_display_page` and `set_background_color` choose the page shown and
  the background colour.
- `set_sprite_attribute_address` and `set_sprite_pattern_address` place the
  sprite tables.
- `sprites_on` and `sprites_off` enable and disable sprites.
- `read_status` reads a status register.
- `boxfill` starts the rectangle fill command.

`retrovram.keys.pressed(stick0, stick1, pad0, pad1, pad2, row3, row5, row9, row10)`
turns stick, trigger and keyboard-matrix readings into a list of `Button`
values. The list is always in the order up, right, down, left, A, B.

## Starfall

`retrovram.starfall.Starfield` models the falling-star demo on bit planes
that are 80 bytes wide. Each `Star` has a line `y`, a `speed` and a 3-bit
`color`. Stars are placed at random (`seed` makes this repeatable), or you
can pass them in yourself.

- `Starfield.step()` advances one frame.
- `Starfield.frames(count)` yields the screen after each frame. It yields
  the same `PlaneBuffer` every time.

## Converting binaries

`retrovram-binconv` copies an MSX BLOAD binary into another file and changes
the header on the way. It drops the leading ID byte, keeps the 4 address
bytes, drops the next 2 bytes and copies the rest unchanged:

```
retrovram-binconv GAME.BIN GAME88.BIN
```

The command exits with status 1 if it gets fewer than two arguments or
cannot open a file. The same conversion is available as
`retrovram.binconv.convert(source, target)`, which returns the number of
bytes written.

## What it does not do

`retrovram` computes memory contents and register writes only. It has no:

- image viewer;
- window or screen output;
- running animation loop;
- live keyboard or joystick reading.

Showing the results is up to you: write them to a file or pass them to an
emulator.