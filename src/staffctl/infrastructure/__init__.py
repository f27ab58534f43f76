"""Infrastructure layer — durable storage for the record collection.

Depends on stdlib, pydantic, and the domain layer only.
It must never import from services, commands, or output.
The service layer bridges between domain models and infrastructure.
"""
