"""HTTP API for the rāga catalog and practice sessions."""
