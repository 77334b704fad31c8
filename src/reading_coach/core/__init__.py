"""Core data types shared across the reading coach pipeline."""
