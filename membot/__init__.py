"""Keyword-driven chatbot that walks an answer graph loaded from a text file."""

__version__ = "0.1.0"