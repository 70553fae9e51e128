"""Command-line interface for DynamicCrud."""
