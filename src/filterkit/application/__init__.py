"""Application layer: filter probing and reporting."""
