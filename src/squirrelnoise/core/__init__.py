"""Scalar SquirrelNoise5 primitives."""
