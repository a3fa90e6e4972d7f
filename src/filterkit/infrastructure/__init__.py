"""Infrastructure layer: value primitives and filter factories."""
