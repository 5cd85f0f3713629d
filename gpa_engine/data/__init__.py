"""
Data loading and parsing module.

This package handles all file I/O and transcript parsing.
"""

from .loader import DataLoader
from .parser import TranscriptParser

__all__ = ["DataLoader", "TranscriptParser"]
