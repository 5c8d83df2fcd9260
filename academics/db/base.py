from academics.db.base_class import Base

# import models so SQLAlchemy registers them on Base.metadata
from academics.models import course, grade, student  # noqa: F401

__all__ = ["Base"]
