"""Service layer: link operations returning ServiceResult.

Services may import from helpers, domain and infrastructure.
They must never import from commands or output.
"""
