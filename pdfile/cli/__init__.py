"""Command line interface for pdfile."""
