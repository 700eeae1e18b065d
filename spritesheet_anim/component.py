"""The per-entity state of an animation being played."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable


@dataclass
class AnimationProgress:
    """The progress of an animation being played.

    ``frame`` is an absolute frame index within the whole animation and wraps
    around at each repetition; ``repetition`` counts the repetitions.
    """

    frame: int = 0
    repetition: int = 0


@dataclass
class SpritesheetAnimation:
    """Plays an animation on an entity.

    Setting ``animation_id`` directly keeps the current progress, which is
    useful for animation variants that must resume from the same frame;
    :meth:`switch` also resets the progress.
    """

    animation_id: Hashable
    progress: AnimationProgress = field(default_factory=AnimationProgress)
    playing: bool = True
    speed_factor: float = 1.0

    @classmethod
    def from_id(cls, animation_id: Hashable) -> SpritesheetAnimation:
        """Create a playing animation at its first frame."""
        return cls(animation_id=animation_id)

    def switch(self, animation_id: Hashable) -> None:
        """Switch to another animation, starting it from the beginning."""
        self.animation_id = animation_id
        self.reset()

    def reset(self) -> None:
        """Go back to the first frame of the first repetition."""
        self.progress.frame = 0
        self.progress.repetition = 0