"""Database declarative base shared by all ORM models."""
