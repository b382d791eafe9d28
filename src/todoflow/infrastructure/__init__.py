"""Infrastructure adapters: identity, persistence."""
