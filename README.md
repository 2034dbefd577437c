# sevenleaf

Building blocks for a live video compositor, each usable on its own:

- `sevenleaf.atomic`: `AtomicInt`, a 32- or 64-bit signed integer guarded by
  a lock, with `load`, `store`, `fetch_add`, `fetch_sub`, `fetch_increment`
  and `fetch_decrement`. Arithmetic wraps around in two's complement.
- `sevenleaf.uint128`: unsigned 128-bit helpers on plain Python integers:
  `join128` / `split128`, `uadd128`, `usub128`, `umul64x64`, `udiv128` and
  the bitwise `uand128`, `uandnot128`, `uor128`, `uxor128`. Out-of-range
  operands raise `ValueError`.
- `sevenleaf.timing`: a monotonic nanosecond clock (`gettime_ns`) and sleeps
  (`sleep_seconds`, `sleep_ms`, `sleep_ns`). `wait_until_ns(target)` returns
  `True` if the target had already passed, `False` after waiting for it.
- `sevenleaf.files`: `path_exists`, `directory_exists`, and
  `library_filename`, which adds `.so` (or `.dylib` on macOS) to a
  shared-library name that lacks it.
- `sevenleaf.system`: core counts, L1/L2/L3 cache sizes, physical memory,
  page size and battery presence. Values that cannot be found come back as
  `-1`.
- `sevenleaf.int16x8`: `Int16x8`, an immutable vector of eight signed 16-bit
  lanes with lane access, interleaving (`unpack16_lo`, `unpack32`, ...),
  reversals, `blend`, `alignr`, `swizzle` and bitwise logic (`~`, `&`, `|`,
  `^`, `andnot`, `ornot`, `select`).
- `sevenleaf.int16x8_arith`: lane-wise shifts (`shr`, `shl`, `shra`),
  wrapping and saturating arithmetic (`add`, `adds`, `sub`, `subs`, `mul`,
  `neg`), comparison masks (`cmpeq` ... `cmple`, true lanes are `-1`) and
  `minimum`, `maximum`, `clamp`. Scalars are accepted where a vector is.
- `sevenleaf.geometry`: `Geometry` meshes of vertices and 16-bit triangle
  indices, built by `circle_geometry`, `plane_geometry` (optionally with
  texture coordinates) and `rectangle_geometry` (a bordered outline).
- `sevenleaf.pacing`: `Framerate` (default 60000/1001) and `FramePacer`,
  which waits for each frame deadline and counts delivered and dropped
  frames.
- `sevenleaf.layout`: `Size`, `Thickness`, `ResizeMode` and
  `compute_layout`, which fits a source picture into a padded destination
  and returns a `Layout` (preview size, origin, centre, scissor rectangle);
  `ortho_offcenter` builds the matching orthographic projection for row
  vectors (`p @ M`).

## Install

```
pip install .
```

## Examples

Lay out a 1920×1080 source inside a 1280×800 window with padding:

```python
from sevenleaf.layout import ResizeMode, Size, Thickness, compute_layout

layout = compute_layout(
    Size(1920, 1080),
    Size(1280, 800),
    Thickness(8, 8, 8, 8),
    1.0,
    ResizeMode.ASPECT_FIT,
)
print(layout.preview_size, layout.origin, layout.scissor)
```

Pace a loop at 59.94 frames per second:

```python
from sevenleaf.pacing import Framerate, FramePacer
from sevenleaf.timing import gettime_ns, wait_until_ns

pacer = FramePacer(Framerate(60000, 1001), gettime_ns(), wait_until_ns, gettime_ns)
for _ in range(3):
    timestamp = pacer.next_timestamp()
    # render the frame for `timestamp` here
    pacer.advance()
print(pacer.frame_count, pacer.dropped_frame_count)
```

Build the mesh of a textured plane:

```python
from sevenleaf.geometry import plane_geometry

plane = plane_geometry(1, 1, 16.0, 9.0, True, 0.0, 0.0, 0)
print(plane.index_count(), plane.vertex_bytes(), plane.index_bytes())
```

Saturating vector arithmetic:

```python
from sevenleaf.int16x8 import Int16x8
from sevenleaf.int16x8_arith import adds

print(adds(Int16x8.splat(30000), 10000))  # every lane is 32767
```

## What this package does not do

It computes the data a compositor works with (meshes, layouts, projections,
frame timing) but draws nothing: there is no GPU device, swap chain, window
or display loop, no registry of displays or generators, no frame-format
catalogue or reference-counted frames, no lookup of well-known user folders,
and no thread naming. It provides no command-line program.

## Tests

```
pip install .[test]
pytest
```