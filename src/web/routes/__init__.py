"""Route tables, one module per collaborator area."""
