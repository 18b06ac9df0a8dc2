"""HEARTH command-line interface."""
