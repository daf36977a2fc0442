"""MediaShare - media-sharing backend with idempotent relationship toggling."""

__version__ = "0.1.0"
