"""Core of api-request-tool: configuration, domain models and services.

Nothing in here prints or prompts; the CLI layer owns the terminal.
"""
