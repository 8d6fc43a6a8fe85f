"""Spotify Web API playback client and a small OpenGL player window."""

__version__ = "0.1.0"
__all__ = ["__version__"]