"""Terminal word-search puzzle game with an editable, file-backed word dictionary."""

__version__ = "1.0.0"
__all__ = ["cli", "dictionary", "game", "logs", "storage", "word"]