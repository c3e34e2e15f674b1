"""A small interactive shell with pipes, redirections, here-documents and built-in commands."""

__version__ = "0.1.0"