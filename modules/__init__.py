"""Front-end modules."""
