"""Outer surfaces (CLI)."""
