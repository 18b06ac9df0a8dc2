"""Entrypoints (driving adapters) for HEARTH."""
