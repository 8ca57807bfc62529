"""Text-editing core of the sietor screen editor."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "fonts",
    "keymaps",
    "layout",
    "runtime",
    "session",
    "settings",
]

__version__ = "0.1.0"
