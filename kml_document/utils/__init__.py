"""Small shared helpers with no dependencies on the element model."""
