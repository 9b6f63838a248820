"""Core helpers shared by pdfile tools."""
