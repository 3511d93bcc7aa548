"""Shared cross-cutting utilities: errors, logging and request correlation."""
