"""Route Metadata Registry (declarative route catalog and generator)."""
