"""ORM models and their declarative base."""
