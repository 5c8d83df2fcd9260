import logging

from academics.db.base import Base
from academics.db.session import engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("database schema ready (%s)", engine.url.render_as_string(hide_password=True))
