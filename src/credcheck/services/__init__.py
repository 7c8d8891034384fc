"""Service layer — credential evaluation.

Services may import from domain and config models.
They must never import from commands or output.
"""
