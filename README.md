# spritesheet_anim

This package provides building blocks for sprite animations that are made from spritesheets. It has six modules:

- `spritesheet_anim.easing` has `Easing` and `EasingVariety`. These give linear, in, out and in-out curves. Each curve comes in quadratic, cubic, quartic, quintic, exponential, circular and sine forms.
- `spritesheet_anim.clip` has `Clip` and `ClipId`. A clip is a sequence of texture-atlas frame indices. It can also hold a duration, a repetition count, a direction, an easing and markers on its frames.
- `spritesheet_anim.spritesheet` has `Spritesheet`, `TextureAtlasLayout` and `URect`. These select frame indices by row, column, position or strip, and build the matching atlas layout.
- `spritesheet_anim.library` has `AnimationLibrary`, `LibraryError` and `NameAlreadyTakenError`. The library registers clips, creates markers, and gives them unique names.
- `spritesheet_anim.events` has `AnimationMarkerId` and the event values. The base class is `AnimationEvent`. Its subclasses are `MarkerHit`, `ClipRepetitionEnd`, `ClipEnd`, `AnimationRepetitionEnd` and `AnimationEnd`.
- `spritesheet_anim.component` has `SpritesheetAnimation` and `AnimationProgress`. Together they hold the playback state of one sprite.

## Installation

```
pip install .
```

The package uses only the standard library. It needs Python 3.10 or later.

## Easing

```python
from spritesheet_anim.easing import Easing, EasingVariety

Easing().get(0.3)                                   # 0.3 (linear is the default)
Easing("in", EasingVariety.QUADRATIC).get(0.5)      # 0.25
Easing("out", EasingVariety.CUBIC).get(0.5)         # 0.875
Easing("in_out", EasingVariety.SIN).get(1.7)        # 1.0
```

`kind` must be one of `"linear"`, `"in"`, `"out"` or `"in_out"`. A linear easing takes no variety. Every other kind needs an `EasingVariety`. Any other combination raises `ValueError`.

`get` clamps its input to [0, 1]. Its output is also in [0, 1].

## Selecting frames from a spritesheet

```python
from spritesheet_anim.spritesheet import Spritesheet

sheet = Spritesheet(8, 4)                      # 8 columns, 4 rows

sheet.all()                                    # 0 .. 31
sheet.row(2)                                   # every frame of row 2
sheet.column(3)                                # every frame of column 3
sheet.row_partial(1, 1, 3, inclusive=True)     # columns 1 to 3 of row 1
sheet.column_partial(1, start=1)               # rows 1 onwards of column 1
sheet.horizontal_strip(6, 0, 4)                # [6, 7, 8, 9], wraps onto the next row
sheet.vertical_strip(0, 1, 12)                 # wraps onto the next column
sheet.positions([(1, 0), (0, 1)])              # [1, 8]

layout = sheet.atlas_layout(96, 96)
layout.size                                    # (768, 384)
layout.textures[0]                             # URect(min_x=0, min_y=0, max_x=96, max_y=96)
```

For `row_partial` and `column_partial`, `start` defaults to the first index. `end` defaults to one past the last index. `inclusive=True` includes `end` in the range.

A query that reaches outside the sheet logs a warning through the `spritesheet_anim.spritesheet` logger. It then returns only the frames that exist, which can be an empty list.

## Clips, markers and the library

```python
from spritesheet_anim.clip import Clip
from spritesheet_anim.library import AnimationLibrary, NameAlreadyTakenError

library = AnimationLibrary()

marker_id = library.new_marker()
library.name_marker(marker_id, "bullet goes out")

clip = (
    Clip.from_frames(sheet.row(3))
    .with_repetitions(5)
    .with_marker(marker_id, 3)
)
clip_id = library.register_clip(clip)
library.name_clip(clip_id, "shoot")

library.clip_with_name("shoot") == clip_id            # True
library.get_clip(clip_id).markers                     # {3: [marker_id]}
library.is_marker_name(marker_id, "bullet goes out")  # True
```

Identifiers are handed out in order. Their string forms look like `clip0` and `marker0`.

Each name belongs to at most one clip, and to at most one marker. Giving a name that is already in use to a different clip or marker raises `NameAlreadyTakenError`, a subclass of `LibraryError`. Naming the same item again replaces its old name.

`clip_names()`, `marker_names()` and `clips()` return read-only mappings. `markers()` returns a frozenset. `get_clip` raises `KeyError` for an identifier the library does not know.

The `with_*` methods of `Clip` return a modified copy and leave the original unchanged. `add_marker` changes the clip in place and returns it. Negative repetitions or marker frame indices raise `ValueError`. `duration` and `direction` are stored as given.

## Events

The event classes are frozen, hashable dataclasses with keyword-only fields. Every event has `entity` and `animation_id`. The subclasses add clip, marker and repetition fields:

```python
from spritesheet_anim.events import ClipEnd

ClipEnd(entity="hero", animation_id=0, clip_id=clip_id)
```

## Playback state

```python
from spritesheet_anim.component import SpritesheetAnimation

anim = SpritesheetAnimation.from_id("walk")   # playing, frame 0, repetition 0, speed 1.0
anim.playing = False
anim.speed_factor = 2.0
anim.switch("run")                            # also resets frame and repetition
anim.reset()
```

## What the package does not do

The package does not play animations:

- There is no animation type made of several clips.
- Nothing advances a `SpritesheetAnimation` over time.
- Nothing produces event values on its own.
- Nothing renders sprites.

Code that uses this package must do those things itself, with the pieces described above.

## Running the tests

```
pip install .[test]
pytest
```