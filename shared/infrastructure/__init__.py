"""Framework adapters shared across apps."""
