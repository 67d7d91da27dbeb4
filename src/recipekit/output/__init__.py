"""Output layer — render ServiceResult for terminals and pipes."""
