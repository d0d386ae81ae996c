"""Framework adapters for federql."""
