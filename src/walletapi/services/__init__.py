"""Business logic services operating over injected storage."""
