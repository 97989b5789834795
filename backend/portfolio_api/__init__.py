"""Portfolio site and agent API backend."""
