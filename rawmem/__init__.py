"""Byte-level memory routines over bytearrays, shift-and-add multiplication and deterministic fuzzing generators."""

__version__ = "0.1.0"
__all__ = ["arith", "memory", "fuzz"]