"""todoflow command-line interface."""
