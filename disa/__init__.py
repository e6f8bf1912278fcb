"""Tokenizer for a small subset of the C language."""

__version__ = "0.1.0"
__all__ = ["token", "tokenizer"]