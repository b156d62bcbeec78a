"""Array-based evaluation engine."""
