"""Find files by name keywords in a directory tree and copy the chosen ones elsewhere."""

__version__ = "0.1.0"
__all__ = ["matching", "scanner", "session", "cli"]