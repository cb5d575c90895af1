# circuitos

Building blocks for small gadgets, in plain Python with no dependencies:

- byte buffers with separate read and write cursors,
- an LED matrix canvas with rotation, two pixel fonts, bitmaps and
  animation tracking,
- drivers for the AW9523 I/O expander and the IS31FL3731 LED matrix
  controller, talking through an I2C bus object you supply,
- a player for frequency-sweep sound effects on a piezo buzzer.

## Install

    pip install circuitos

To run the tests:

    pip install "circuitos[test]"
    pytest

## Modules

### `circuitos.buffers`

- `DataBuffer(size)`: a linear buffer. `write_data()` moves unread bytes to
  the front and returns a writable `memoryview` of the free space;
  `write_move(n)` commits `n` written bytes. `read_data()` returns a read-only
  view of the unread bytes and `read_move(n)` consumes them.
  `read_available()`, `write_available()` and `clear()` complete it.
- `LazyDataBuffer(size)`: the same, but it compacts only when `relocate()` is
  called. `potential_write_available()` tells how much space that would
  reclaim, and `clear()` rewinds only the read cursor.
- `RingBuffer(size)`: a circular buffer holding up to `size` bytes.
  `write(data)` stores what fits and returns the count, `read(n)` returns up
  to `n` bytes, `peek(size, offset=0)` looks ahead without consuming (or gives
  `None` when not enough data is there), and `skip(n)` drops bytes.
- `FSBuffer(file, size)`: a read-ahead buffer over a binary file object.
  `refill()` keeps the unread bytes and tops up from the file, returning
  whether anything is buffered. `data()`, `available()`, `move_read(n)` and
  `clear()` work on what is buffered.

Moving a cursor past the data or space that is there raises
`BufferRangeError`, a `ValueError`.

### `circuitos.notes`

`Note` is an `IntEnum` of note frequencies in hertz, from `B0` (31) to `DS8`
(4978), with `S` marking a sharp. `Note.from_name("c#5")`, `"CS5"` and
`"NOTE_CS5"` all give `Note.CS5`. Unknown names raise `ValueError`.

### `circuitos.bitmaps`

Three 18×18 RGB565 icons: `ARROW_RIGHT`, `CROSS` and `YES`, each a tuple of
324 pixels that are either `WHITE` (0xFFFF) or `BLACK` (0x0000).
`rows(bitmap)` splits one into 18 rows.

### `circuitos.font5x7` and `circuitos.tomthumb`

- `classic_glyph(code)` returns the five column bytes of a glyph in the
  classic 5×7 font; bit 0 of each column is the top row. `code` may be an
  integer or a one-character string.
- `TOM_THUMB` is the 3×5 Tom Thumb font (characters 0x20 to 0x7E) as a
  `GFXFont` of `Glyph` entries. `TOM_THUMB.glyph(code)` gives the metrics and
  `TOM_THUMB.glyph_bitmap(code)` the pixels as rows of booleans.

### `circuitos.matrix_pixel`

`MatrixPixel(r, g, b, i)` is a frozen colour with intensity, each 0–255, with
ready-made `RED`, `GREEN`, `BLUE`, `YELLOW`, `CYAN`, `MAGENTA`, `WHITE`,
`BLACK` and `OFF`. `MatrixPixelData(width, height)` is a grid of them:
`get` and `set` ignore coordinates outside the grid, while `data[x, y]`
raises `IndexError` there. It also has `clear(color)`, `copy()` and equality.

### `circuitos.matrix_output`

- `MatrixOutput`: the abstract base for anything that shows frames, with
  `width`, `height`, a `brightness` property (0–255) and `init()` / `push(data)`.
- `MatrixOutputBuffer(output=None, *, width=None, height=None)`: keeps a copy
  of the last frame in `data` and forwards frames and brightness to an
  optional output; `push_buffered()` sends the stored frame again.
- `MatrixPartOutput(output, width, height)`: a region of a larger
  `MatrixOutputBuffer`. Subclasses implement `map_coords(x, y)`; pushed
  intensities are scaled by the part's brightness.
- `DelayedMatrixOutput(out, push_delay, *, clock=None, loop_manager=None)`:
  passes a frame on at once if `push_delay` milliseconds have passed since the
  last one, otherwise holds it back until a later `loop(micros)` call.
  `init()` registers with `loop_manager.add_listener` when one is given.

### `circuitos.matrix` and `circuitos.matrix_anim`

`Matrix(output)` draws into a frame and pushes it to a `MatrixOutput`.
It has `begin()`, `clear(color)`, `push()`, `draw_pixel`, `draw_pixel_index`,
`draw_char`, `draw_string`, `draw_bitmap` (an intensity map in one colour),
`draw_pixel_data`, a `rotation` of 0–3 quarter turns, `brightness`, and a
`font` of `FontSize.BIG` (5×7) or `FontSize.SMALL` (3×5).

`MatrixAnim` is the abstract base for animations: subclasses implement
`reset`, `push`, `on_start` and `on_stop`, and draw through the same
`draw_*` methods, offset by the animation's `x` and `y`.
`Matrix.start_animation(anim)` attaches and starts one;
`Matrix.stop_animations()` stops all, and `Matrix.animations` lists those
running.

### `circuitos.i2c`, `circuitos.aw9523`, `circuitos.is31fl3731`

`I2CBus` is the abstract bus, with `write(address, data)` and
`read(address, count)`; failures are reported as `I2CError`. The helpers
`probe`, `write_register` and `read_register` build on it.

- `AW9523(bus, address=0x58)`: `begin()` checks the chip answers and has
  ID 0x23, raising `I2CError` otherwise. Then `pin_mode(pin, PinMode.IN /
  OUT / LED)`, `read`, `write`, `dim`, `set_interrupt` and
  `set_current_limit(CurrentLimit...)` drive its 16 pins.
- `IS31FL3731(bus, address=0x74)`: a 16×9 `MatrixOutput`. `init()` powers it
  up in picture mode; `push(data)` sends only the runs of pixels that changed
  since the last frame; setting `brightness` resends the whole frame;
  `audio_sync(sync)` toggles audio sync.

### `circuitos.chirp`

`Chirp(start_freq, end_freq, duration)` is a sweep over `duration`
milliseconds; `frequency_at(elapsed)` gives the frequency at a moment.
`Piezo(listener=None)` keeps the buzzer's `frequency`, `volume` and `muted`
state, and calls the listener with each new frequency (0 for silence).
`ChirpSystem(piezo)` plays a list of chirps on a background thread:
`play(sound)` starts, or replaces what is playing, `stop()` silences at
once, and `wait(timeout=None)` waits for the end.

## Examples

    from circuitos.buffers import RingBuffer

    ring = RingBuffer(8)
    assert ring.write(b"hello") == 5
    assert ring.peek(2) == b"he"
    assert ring.read(5) == b"hello"

Drawing into an in-memory buffer:

    from circuitos.matrix import Matrix, FontSize
    from circuitos.matrix_output import MatrixOutputBuffer
    from circuitos.matrix_pixel import MatrixPixel

    out = MatrixOutputBuffer(width=16, height=9)
    matrix = Matrix(out)
    matrix.begin()
    matrix.font = FontSize.BIG
    matrix.draw_string(0, 0, "Hi", MatrixPixel.WHITE)
    matrix.push()
    frame = out.data

Driving an AW9523 through a bus of your own:

    from circuitos.i2c import I2CBus
    from circuitos.aw9523 import AW9523, PinMode

    class RecordingBus(I2CBus):
        def __init__(self):
            self.writes = []

        def write(self, address, data):
            self.writes.append((address, bytes(data)))

        def read(self, address, count):
            return bytes([0x23]) * count

    chip = AW9523(RecordingBus(), sleep=lambda seconds: None)
    chip.begin()
    chip.pin_mode(3, PinMode.OUT)
    chip.write(3, True)

A chirp:

    from circuitos.chirp import Chirp, ChirpSystem, Piezo
    from circuitos.notes import Note

    system = ChirpSystem(Piezo(listener=print))
    system.play([Chirp(Note.C5, Note.C6, 150), Chirp(Note.C6, Note.C5, 150)])
    system.wait()

## What it does not do

- It talks to no hardware by itself. There is no concrete `I2CBus`: you
  provide one for your platform (or a fake for tests). `Piezo` makes no
  sound; it only records the frequency and tells its listener.
- There are no ready-made animations, only the `MatrixAnim` base class.
- There is no command-line program; it is a library.