"""Domain layer — validated values, variant builders, type-state builders.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
