"""Database Infrastructure: SQLAlchemy declarative Base shared by models and migrations."""
