# reformant

Supporting pieces for a voice and formant analysis tool, usable on their own.
The package has no dependencies outside the standard library.

- `reformant.okcolor`: conversions between gamma-encoded sRGB, linear sRGB,
  Oklab, Okhsl and Okhsv, and several gamut-clipping strategies
  (`gamut_clip_preserve_chroma`, `gamut_clip_project_to_0_5`,
  `gamut_clip_project_to_l_cusp`, `gamut_clip_adaptive_l0_0_5`,
  `gamut_clip_adaptive_l0_l_cusp`). Colours are the named tuples `RGB`, `Lab`,
  `HSL` and `HSV`.
- `reformant.semaphore`: `LightweightSemaphore`, a counting semaphore with
  `try_wait`, `wait(timeout_usecs)` (microseconds; negative waits without
  limit) and `signal(count)`.
- `reformant.rwqueue`: `ReaderWriterQueue`, a FIFO queue for one producer
  thread and one consumer thread, built from a ring of blocks and growing by
  blocks when full. Also `ceil_to_pow2` and the `QueueEmpty` exception.
- `reformant.blockingqueue`: `BlockingReaderWriterQueue`, the same queue with
  blocking and timed dequeue.
- `reformant.vector2d`: `Vector2D`, a bounds-checked row-major 2D grid, with
  `RowView` row views.
- `reformant.style`: the interface colour palette (`light_palette`,
  `style_colors`, keyed by `StyleColor`) and `set_outline_color` for deriving
  marker outline colours.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Colour conversions:

```python
from reformant.okcolor import RGB, srgb_to_okhsl, okhsl_to_srgb

hsl = srgb_to_okhsl(RGB(0.2, 0.5, 0.8))   # HSL(h, s, l)
back = okhsl_to_srgb(hsl)                 # close to RGB(0.2, 0.5, 0.8)
```

A queue between a producer thread and a consumer thread:

```python
from datetime import timedelta
from reformant.blockingqueue import BlockingReaderWriterQueue
from reformant.rwqueue import QueueEmpty

q = BlockingReaderWriterQueue(100)
q.enqueue(1.5)
value = q.wait_dequeue()                  # blocks until an element arrives

try:
    item = q.wait_dequeue_timed(timedelta(milliseconds=10))
except QueueEmpty:
    item = None                           # timed out
```

`wait_dequeue_timed` also takes a plain number of microseconds.
`try_dequeue` and `peek` raise `QueueEmpty` when there is nothing to take;
`pop` returns `False` instead. `try_enqueue` returns `False` rather than
allocating a new block, while `enqueue` always succeeds. `size_approx()` and
`max_capacity()` report the current element count and the room available
without allocating.

A 2D grid:

```python
from reformant.vector2d import Vector2D

grid = Vector2D(3, 4, 0.0)
grid[1, 2] = 7.0
row = grid.row(1)                         # or grid[1]
row[3] = 1.0
grid.resize(4, 4)
```

Out-of-range indices, negative ones included, raise `IndexError`.

Palette and outline colour:

```python
from reformant.style import StyleColor, style_colors, set_outline_color

colors = style_colors(dark=True, alpha=1.0)
window_bg = colors[StyleColor.WINDOW_BG]  # (r, g, b, a)

outline = set_outline_color((0.0, 1.0, 1.0))   # (r, g, b, 0.8)
```

## What this package does not do

It captures, plays and analyses no audio, and it has no window, plots or
command-line program. It provides the colour maths, queues, grid container
and palette that such a tool is built on.