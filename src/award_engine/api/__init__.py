"""HTTP API for the award engine."""
