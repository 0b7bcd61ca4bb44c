"""Survey backend service."""
