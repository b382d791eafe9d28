"""Core domain and protocol layer (no I/O)."""
