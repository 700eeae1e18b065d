"""The global store for clips and animation markers."""

from __future__ import annotations

from types import MappingProxyType
from typing import Hashable, Mapping, TypeVar

from .clip import Clip, ClipId
from .events import AnimationMarkerId

_Id = TypeVar("_Id", bound=Hashable)


class LibraryError(Exception):
    """Base class of the errors raised by :class:`AnimationLibrary`."""


class NameAlreadyTakenError(LibraryError):
    """The name given to a clip or marker is already in use."""


def _assign_name(lookup: dict[_Id, str], item_id: _Id, name: str) -> None:
    existing = _id_with_name(lookup, name)
    if existing is None:
        lookup[item_id] = name
    elif existing != item_id:
        raise NameAlreadyTakenError(f"the name {name!r} is already in use")


def _id_with_name(lookup: Mapping[_Id, str], name: str) -> _Id | None:
    return next((item_id for item_id, value in lookup.items() if value == name), None)


class AnimationLibrary:
    """Registers clips and creates markers, handing out their identifiers."""

    def __init__(self) -> None:
        self._clips: dict[ClipId, Clip] = {}
        self._clip_names: dict[ClipId, str] = {}
        self._markers: set[AnimationMarkerId] = set()
        self._marker_names: dict[AnimationMarkerId, str] = {}

    # Clips

    def register_clip(self, clip: Clip) -> ClipId:
        """Store a clip and return its new identifier."""
        clip_id = ClipId(len(self._clips))
        self._clips[clip_id] = clip
        return clip_id

    def name_clip(self, clip_id: ClipId, name: str) -> None:
        """Give a clip a unique name, replacing any name it had.

        Raises :class:`NameAlreadyTakenError` if another clip has the name.
        """
        _assign_name(self._clip_names, clip_id, str(name))

    def clip_names(self) -> Mapping[ClipId, str]:
        """Return the names of the named clips, keyed by clip identifier."""
        return MappingProxyType(self._clip_names)

    def clip_with_name(self, name: str) -> ClipId | None:
        """Return the identifier of the clip with this name, if any."""
        return _id_with_name(self._clip_names, name)

    def get_clip_name(self, clip_id: ClipId) -> str | None:
        """Return the name of a clip, if it has one."""
        return self._clip_names.get(clip_id)

    def is_clip_name(self, clip_id: ClipId, name: str) -> bool:
        """Tell whether the clip has the given name."""
        return self._clip_names.get(clip_id) == name

    def clips(self) -> Mapping[ClipId, Clip]:
        """Return every registered clip, keyed by identifier."""
        return MappingProxyType(self._clips)

    def get_clip(self, clip_id: ClipId) -> Clip:
        """Return a registered clip; raises KeyError for an unknown identifier."""
        return self._clips[clip_id]

    # Markers

    def new_marker(self) -> AnimationMarkerId:
        """Create a marker and return its identifier."""
        marker_id = AnimationMarkerId(len(self._markers))
        self._markers.add(marker_id)
        return marker_id

    def name_marker(self, marker_id: AnimationMarkerId, name: str) -> None:
        """Give a marker a unique name, replacing any name it had.

        Raises :class:`NameAlreadyTakenError` if another marker has the name.
        """
        _assign_name(self._marker_names, marker_id, str(name))

    def marker_names(self) -> Mapping[AnimationMarkerId, str]:
        """Return the names of the named markers, keyed by marker identifier."""
        return MappingProxyType(self._marker_names)

    def marker_with_name(self, name: str) -> AnimationMarkerId | None:
        """Return the identifier of the marker with this name, if any."""
        return _id_with_name(self._marker_names, name)

    def get_marker_name(self, marker_id: AnimationMarkerId) -> str | None:
        """Return the name of a marker, if it has one."""
        return self._marker_names.get(marker_id)

    def is_marker_name(self, marker_id: AnimationMarkerId, name: str) -> bool:
        """Tell whether the marker has the given name."""
        return self._marker_names.get(marker_id) == name

    def markers(self) -> frozenset[AnimationMarkerId]:
        """Return every marker created by this library."""
        return frozenset(self._markers)