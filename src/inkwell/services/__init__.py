"""Service layer for Inkwell publishing."""
