"""Schema contracts for files loaded from outside the engine."""
