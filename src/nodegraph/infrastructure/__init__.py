"""Infrastructure layer — containers and third-party interop."""
