"""Domain layer — entities, DTOs, validation rules, and the error taxonomy.

This layer depends only on stdlib and pydantic.
It must never import from services, serialization, commands, or config.
"""
