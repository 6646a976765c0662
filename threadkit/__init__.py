"""Threading utilities: a thread-safe stack, lock helpers, joining thread handles, parallel accumulation and thread spawning."""

__version__ = "0.1.0"
__all__ = ["stack", "locking", "joining", "accumulate", "spawn"]