"""Domain model for a procedural level generator."""
