"""Application layer: use case orchestration over the Square boundary."""
