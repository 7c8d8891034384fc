"""Configuration: policy models, settings sources, and logging setup."""
