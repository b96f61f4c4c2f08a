"""Line-oriented text buffer engine with grapheme-aware editing."""

__all__ = [
    "buffer",
    "config",
    "graphemes",
    "highlight",
    "runtime",
]

__version__ = "0.1.0"
