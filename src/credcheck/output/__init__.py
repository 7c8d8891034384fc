"""Output layer — messages, Rich rendering, and JSON for validation results."""
