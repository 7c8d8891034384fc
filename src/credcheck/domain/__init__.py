"""Domain layer: field identifiers, error kinds, outcomes and pure rules.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
