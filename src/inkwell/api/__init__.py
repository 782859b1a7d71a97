"""HTTP API for Inkwell."""
