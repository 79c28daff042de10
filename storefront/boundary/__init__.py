"""Boundary layer: clients for external services."""
