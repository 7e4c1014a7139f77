"""Domain models for the admission desk."""
