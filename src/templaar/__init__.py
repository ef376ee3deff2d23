"""templaar: create text files and directories from dot-file templates."""

__version__ = "0.3.0"
