"""Output layer — Rich console lines and ServiceResult formatting."""
