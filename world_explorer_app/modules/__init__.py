"""Feature modules of the World Explorer app."""
