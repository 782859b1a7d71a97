"""Command-line utilities for Inkwell."""
