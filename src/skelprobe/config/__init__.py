"""Configuration layer — section models, TOML discovery, settings, logging."""
