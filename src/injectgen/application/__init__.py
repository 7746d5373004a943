"""Application layer: the constructor synthesis pipeline."""
