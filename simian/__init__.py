"""Runtime pieces for a small Monkey-style interpreter: tokens, objects, environments, built-ins and logging."""

__version__ = "0.1.0"

__all__ = ["builtins", "environment", "objects", "telemetry", "token_type"]