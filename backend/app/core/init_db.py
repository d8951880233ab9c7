import logging
from sqlalchemy.orm import Session

from app.core import config
from app.core.security import get_password_hash
from app.modules.users import models

logger = logging.getLogger(__name__)


def init_db(db: Session):
    """
    Dipanggil setiap kali server start.
    Mengecek apakah operator default sudah ada, kalau belum dibuatkan dari .env.
    """
    username = config.FIRST_SUPERUSER

    user = db.query(models.User).filter(models.User.username == username).first()

    if not user:
        logger.info("Admin user not found. Creating default superuser: %s", username)

        user_in = models.User(
            username=username,
            hashed_password=get_password_hash(config.FIRST_SUPERUSER_PASSWORD),
            email=config.FIRST_SUPERUSER_EMAIL,
            role="admin",
            is_active=True,
        )

        db.add(user_in)
        db.commit()
        db.refresh(user_in)
        logger.info("Superuser created successfully")
        return user_in

    logger.info("Superuser '%s' already exists. Skipping creation.", username)
    return user
