import os

# Must be set before any session module is imported.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ.setdefault("ORM", "peewee")
