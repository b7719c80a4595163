"""Infrastructure layer — database, edge store, graph construction and traversal.

This layer depends on stdlib and third-party libs (SQLAlchemy, NetworkX).
It must never import from services, commands, or output.
The service layer bridges between domain rules and infrastructure.
"""
