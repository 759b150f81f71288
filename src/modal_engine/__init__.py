"""Rope-backed editing core for a modal terminal text editor."""

__all__ = [
    "adapters",
    "buffer",
    "commands",
    "config",
    "editor",
    "keymaps",
    "modes",
    "runtime",
]

__version__ = "0.1.0"
