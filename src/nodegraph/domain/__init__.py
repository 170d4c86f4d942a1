"""Domain layer — error taxonomy, shared enums and command-line parsers."""
