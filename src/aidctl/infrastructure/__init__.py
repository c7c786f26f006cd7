"""Infrastructure layer — database connections and on-disk storage.

This layer depends on stdlib and third-party libs (SQLAlchemy).
It must never import from services, commands, or output.
"""
