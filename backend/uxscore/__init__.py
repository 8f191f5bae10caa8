"""UX Score evaluation service."""
