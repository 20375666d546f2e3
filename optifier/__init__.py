"""Partial counterparts of dataclasses: every field optional, with merge and checked conversion."""

__version__ = "0.1.0b3"

__all__ = ["naming", "partial", "playground"]