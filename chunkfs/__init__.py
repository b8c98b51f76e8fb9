"""Chunk storage, TCP chunk streaming and an interactive client shell."""

__version__ = "0.1.0"