"""Application layer: dispatch surface, settings and wiring."""
