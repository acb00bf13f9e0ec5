"""Lotus Riyaaz — rāga catalog, tāl metronome and practice sessions."""

__version__ = "0.1.0"
