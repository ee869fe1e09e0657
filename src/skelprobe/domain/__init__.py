"""Domain layer — node capability, enums, and version grammar.

This layer depends only on stdlib.
It must never import from services, infrastructure, plugins, or config.
"""
