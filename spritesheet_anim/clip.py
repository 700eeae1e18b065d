"""Clips: sequences of spritesheet frames with playback parameters."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Iterable

if TYPE_CHECKING:
    from .easing import Easing
    from .events import AnimationMarkerId


@dataclass(frozen=True)
class ClipId:
    """An opaque identifier referencing a registered clip."""

    value: int

    def __str__(self) -> str:
        return f"clip{self.value}"


@dataclass
class Clip:
    """A sequence of texture-atlas frame indices.

    Duration, repetitions, direction and easing are optional; unset values
    are left as ``None``. ``markers`` maps a frame position to the markers
    attached to it, in the order they were added.
    """

    frames: list[int] = field(default_factory=list)
    duration: Any = None
    repetitions: int | None = None
    direction: Any = None
    easing: Easing | None = None
    markers: dict[int, list[AnimationMarkerId]] = field(default_factory=dict)

    @classmethod
    def from_frames(cls, atlas_indices: Iterable[int]) -> Clip:
        """Create a clip from frame indices."""
        return cls(frames=list(atlas_indices))

    def _copy(self, **changes: Any) -> Clip:
        changes.setdefault("frames", list(self.frames))
        changes.setdefault(
            "markers", {frame: list(ids) for frame, ids in self.markers.items()}
        )
        return replace(self, **changes)

    def add_marker(self, marker_id: AnimationMarkerId, frame_index: int) -> Clip:
        """Attach a marker to a frame in place and return this clip."""
        if frame_index < 0:
            raise ValueError("frame index must not be negative")
        self.markers.setdefault(frame_index, []).append(marker_id)
        return self

    def with_marker(self, marker_id: AnimationMarkerId, frame_index: int) -> Clip:
        """Return a copy of this clip with a marker attached to a frame."""
        return self._copy().add_marker(marker_id, frame_index)

    def with_duration(self, duration: Any) -> Clip:
        """Return a copy of this clip with the given duration."""
        return self._copy(duration=duration)

    def with_repetitions(self, repetitions: int) -> Clip:
        """Return a copy of this clip repeated the given number of times."""
        if repetitions < 0:
            raise ValueError("repetitions must not be negative")
        return self._copy(repetitions=repetitions)

    def with_direction(self, direction: Any) -> Clip:
        """Return a copy of this clip with the given direction."""
        return self._copy(direction=direction)

    def with_easing(self, easing: Easing) -> Clip:
        """Return a copy of this clip with the given easing."""
        return self._copy(easing=easing)