"""Configuration loading and default locations."""
