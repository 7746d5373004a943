"""Domain layer: declaration model, exceptions and ports."""
