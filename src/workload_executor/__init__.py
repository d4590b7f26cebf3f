"""Workload-driven test executor for MongoDB deployments."""
