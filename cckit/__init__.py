"""Common utilities: vector, matrix and quaternion math, filesystem helpers, logging and string tools."""

__version__ = "0.1.0"

__all__ = ["constants", "vectors", "mat3", "mat4", "quat", "fs", "log", "strings"]