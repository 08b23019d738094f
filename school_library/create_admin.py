import argparse
import logging
import sys
from .config import Settings
from .database import create_context
from .models.admin import Admin
from .core.security import get_password_hash

logger = logging.getLogger(__name__)


def create_admin(context, username: str, password: str) -> bool:
    """Insert an admin with a bcrypt-hashed password. False if the username is taken."""
    db = context.session_factory()
    try:
        if db.query(Admin).filter(Admin.username == username).first():
            logger.error("El administrador %s ya existe", username)
            return False

        db.add(Admin(username=username, password=get_password_hash(password)))
        db.commit()
        logger.info("Administrador %s creado", username)
        return True
    finally:
        db.close()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the library admin account")
    parser.add_argument("username")
    parser.add_argument("password")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    settings = Settings()
    if not settings.database_url:
        logger.error("DATABASE_URL no definida")
        return 1

    context = create_context(settings)
    context.create_tables()
    try:
        return 0 if create_admin(context, args.username, args.password) else 1
    finally:
        context.engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
