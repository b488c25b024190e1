"""Domain building blocks shared by every app."""
