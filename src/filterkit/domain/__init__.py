"""Domain layer: value objects, options and exceptions."""
