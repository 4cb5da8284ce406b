"""Command-line layer (Typer + Rich + questionary)."""
