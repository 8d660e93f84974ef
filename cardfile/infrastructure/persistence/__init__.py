"""Persistence: SQLAlchemy engine/session, ORM models, repositories, in-memory store."""
