"""Persistence layer: engine, sessions and ORM tables."""
