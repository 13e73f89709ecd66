"""Domain layer — the notifier interface, wrapper links, and chain assembly.

This layer depends only on stdlib, click (default sink), and pydantic.
It must never import from services, commands, config, or plugins.
"""
