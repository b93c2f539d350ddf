"""Domain services (pure business rules, no I/O)."""
