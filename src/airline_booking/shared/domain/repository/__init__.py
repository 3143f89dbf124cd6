from .repository import PersistenceError, Repository

__all__ = ["PersistenceError", "Repository"]
