"""ORM models - import all so Base.metadata is complete for migrations."""

from app.models.logged_set import LoggedSet

__all__ = ["LoggedSet"]
