"""recipekit — shared recipe/user data model, validation, and wire contract."""

__version__ = "0.1.0"
