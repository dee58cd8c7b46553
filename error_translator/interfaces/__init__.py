"""
Interfaces layer package.

Contains the FastAPI exception handlers and wire schemas.
No resolution logic belongs here; the handler delegates to the domain.
"""
