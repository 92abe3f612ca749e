"""Core helpers: text normalization, seeded randomness, error handling."""
