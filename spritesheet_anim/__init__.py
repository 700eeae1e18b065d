"""Easing curves, clips, spritesheet frame selection, events, playback state and a named store for clips and markers."""

__version__ = "0.1.0"

__all__ = ["clip", "component", "easing", "events", "library", "spritesheet"]