"""Service layer — ServiceResult-returning operations for the CLI."""
