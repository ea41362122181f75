"""Infrastructure layer — SQLite database and repositories.

This layer depends on stdlib, third-party libs (SQLAlchemy) and the
domain models it hydrates. It must never import from services, routing,
bot, commands, or output.
"""
