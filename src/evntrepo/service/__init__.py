"""Pipeline, index and top-level run services."""
