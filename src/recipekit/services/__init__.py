"""Service layer — boundary operations returning ServiceResult.

Services may import from domain and serialization layers.
They must never import from commands or output.
"""
