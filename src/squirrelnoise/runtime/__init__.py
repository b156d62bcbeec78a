"""Runtime helpers (logging)."""
