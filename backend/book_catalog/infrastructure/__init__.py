"""Infrastructure: database sessions, the SQL book repository, and logging setup."""
