"""Runtime support: panics, checked integers, hashing, optionals, results, guards, tuples, variants, spans and vectors."""

__version__ = "0.1.0"