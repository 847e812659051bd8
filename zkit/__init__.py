"""Hashing, an integer-keyed hash table, CLI options, a job pool and scalar math helpers."""

__version__ = "0.1.0"

__all__ = ["hashing", "hashtable", "opts", "jobs", "scalar"]