"""Events emitted when an animation reaches a point of interest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Hashable

if TYPE_CHECKING:
    from .clip import ClipId


@dataclass(frozen=True)
class AnimationMarkerId:
    """An opaque identifier referencing an animation marker."""

    value: int

    def __str__(self) -> str:
        return f"marker{self.value}"


@dataclass(frozen=True, kw_only=True)
class AnimationEvent:
    """Base of every animation event: which entity and which animation."""

    entity: Hashable
    animation_id: Hashable


@dataclass(frozen=True, kw_only=True)
class MarkerHit(AnimationEvent):
    """An animation marker has been hit."""

    marker_id: AnimationMarkerId
    animation_repetition: int
    clip_id: ClipId
    clip_repetition: int


@dataclass(frozen=True, kw_only=True)
class ClipRepetitionEnd(AnimationEvent):
    """A repetition of a clip has ended."""

    clip_id: ClipId
    clip_repetition: int


@dataclass(frozen=True, kw_only=True)
class ClipEnd(AnimationEvent):
    """A clip has ended, after its last repetition."""

    clip_id: ClipId


@dataclass(frozen=True, kw_only=True)
class AnimationRepetitionEnd(AnimationEvent):
    """A repetition of an animation has ended."""

    animation_repetition: int


@dataclass(frozen=True, kw_only=True)
class AnimationEnd(AnimationEvent):
    """An animation has ended, after its last repetition."""