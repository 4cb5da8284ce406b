"""Core services: URL assembly, body formatting and pipeline orchestration."""
