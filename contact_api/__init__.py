"""Contact API - contact form backend (validate, store, notify)."""

__version__ = "1.0.0"
