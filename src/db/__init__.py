"""
Package marker for database validation helpers in `src.db`.
Helpers here borrow an open SQLAlchemy connection and never manage its lifecycle.
"""
