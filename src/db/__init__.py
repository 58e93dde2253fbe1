"""
Database Module
-------------
Handles database connections, ORM models, and database operations.
Uses SQLAlchemy for storage and defines the schema for campgrounds and their reviews.
"""
