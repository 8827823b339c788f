"""Helper layer: the view-facing link helpers.

Helpers may import from domain and infrastructure.
They must never import from services, commands, or output.
"""
