"""Adapters to the outside world: HTTP (httpx) and the terminal (questionary)."""
