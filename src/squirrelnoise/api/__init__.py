"""Public value types for the import-first API."""
