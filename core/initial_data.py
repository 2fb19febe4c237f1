"""Schema creation and the seeded admin account."""
import logging

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from auth.utils.auth_utils import get_password_hash
from core.config_loader import settings
from core.database import Base
from user.models import Role, User
import models_bootstrap  # noqa: F401  (registers every table on Base.metadata)

logger = logging.getLogger(__name__)


def create_tables(engine: Engine) -> None:
    Base.metadata.create_all(engine)


def seed_admin_user(db: Session) -> User:
    """Make sure the default admin exists; returns it either way."""
    admin = db.scalars(select(User).where(User.username == settings.DEFAULT_ADMIN_USERNAME)).first()
    if admin:
        return admin

    admin = User(
        username=settings.DEFAULT_ADMIN_USERNAME,
        password_hash=get_password_hash(settings.DEFAULT_ADMIN_PASSWORD),
        email=settings.DEFAULT_ADMIN_EMAIL,
        name="Administrator",
        role=Role.admin.value,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.warning("created default admin user %r; change its password", admin.username)
    return admin


def init_db(engine: Engine, session_factory: sessionmaker) -> None:
    create_tables(engine)
    with session_factory() as db:
        seed_admin_user(db)
