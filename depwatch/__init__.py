"""Shape dependency changelog entries, build digests and deliver them."""

__version__ = "0.1.0"