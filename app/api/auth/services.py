import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.core.hashing import Hasher
from app.core.security import create_access_token
from app.db.models.user import User
from app.db.store import EntityStore
from app.api.auth.schemas import UserCreate, UserLogin

logger = logging.getLogger(__name__)


def register_user(db: Session, user: UserCreate) -> str:
    users = EntityStore(db, User)
    if users.find([User.email == user.email]):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")

    new_user = users.insert({
        "email": user.email,
        "name": user.name,
        "hashed_password": Hasher.hash_password(user.password),
    })
    logger.info("Registered user %s", new_user.id)
    return create_access_token({"sub": new_user.email})


def login_user(db: Session, credentials: UserLogin) -> str:
    matches = EntityStore(db, User).find([User.email == credentials.email])
    db_user = matches[0] if matches else None
    if not db_user or not Hasher.verify_password(credentials.password, db_user.hashed_password):
        logger.warning("Failed login for %s", credentials.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return create_access_token({"sub": db_user.email})
