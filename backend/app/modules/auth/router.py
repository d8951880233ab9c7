import logging
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
from app.core.config import LOGIN_RATE_LIMIT
from app.core.database import get_db
from app.core.limiter import limiter
from app.core.security import verify_password, create_access_token
from app.modules.auth.deps import get_current_user
from app.modules.users import models, schemas

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


@router.post("/auth/token", response_model=schemas.Token)
@limiter.limit(LOGIN_RATE_LIMIT)
def login_for_access_token(request: Request, form_data: OAuth2PasswordRequestForm = Depends(),
                           db: Session = Depends(get_db)):
    user = db.query(models.User).filter(models.User.username == form_data.username).first()

    # User ada? Password cocok? Masih aktif?
    if not user or not verify_password(form_data.password, user.hashed_password) or not user.is_active:
        logger.warning("Failed login attempt for '%s'", form_data.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid login credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(data={"sub": user.username, "role": user.role})
    logger.info("User '%s' logged in", user.username)

    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/auth/me", response_model=schemas.UserResponse)
def read_current_user(current_user: models.User = Depends(get_current_user)):
    return current_user
