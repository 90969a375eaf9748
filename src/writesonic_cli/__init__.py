"""Writesonic CLI - AI content generation from the terminal."""

__version__ = "0.1.0"
