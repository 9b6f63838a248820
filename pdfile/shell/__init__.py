"""Windows shell integration helpers."""
