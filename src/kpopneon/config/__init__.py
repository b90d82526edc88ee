"""Configuration package: file locations, TOML config and fixed settings."""
