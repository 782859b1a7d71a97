"""Core configuration for Inkwell."""
