"""HTTP liveness and dependency health endpoints."""
