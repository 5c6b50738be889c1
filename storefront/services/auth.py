from datetime import datetime, timedelta
from typing import Optional
from sqlmodel import Session, select
from sqlalchemy.exc import IntegrityError
from passlib.context import CryptContext
from jose import jwt, JWTError

from storefront.core.config import Settings
from storefront.core.errors import Conflict, Forbidden, InvalidCredentials
from storefront.core.logging import get_logger
from storefront.models.user import User

logger = get_logger(__name__)

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

class AuthService:
    def __init__(self, session: Session, settings: Settings):
        self.session = session
        self.settings = settings

    def get_password_hash(self, password: str) -> str:
        return pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return pwd_context.verify(plain_password, hashed_password)

    def create_access_token(self, user_id: int, expires_delta: Optional[timedelta] = None) -> str:
        if expires_delta is None:
            # Use the default from config (7 days)
            expires_delta = timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        to_encode = {"sub": str(user_id), "exp": datetime.utcnow() + expires_delta}
        return jwt.encode(to_encode, self.settings.SECRET_KEY, algorithm=self.settings.ALGORITHM)

    def decode_access_token(self, token: str) -> int:
        """Return the user id carried by ``token`` or raise Forbidden."""
        try:
            payload = jwt.decode(token, self.settings.SECRET_KEY, algorithms=[self.settings.ALGORITHM])
            return int(payload["sub"])
        except (JWTError, KeyError, TypeError, ValueError) as e:
            logger.info("Rejected access token: %s", e)
            raise Forbidden()

    def get_user(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.email == email)).first()

    def register_user(self, name: str, email: str, password: str) -> User:
        if self.get_user_by_email(email):
            raise Conflict()

        user = User(
            name=name,
            email=email,
            password_hash=self.get_password_hash(password),
            cart=[],
        )
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            # lost a race with another registration for the same email
            self.session.rollback()
            raise Conflict()
        self.session.refresh(user)
        logger.info("Registered user %s", user.id)
        return user

    def authenticate_user(self, email: str, password: str) -> User:
        # Same error for unknown email and wrong password
        user = self.get_user_by_email(email)
        if not user or not self.verify_password(password, user.password_hash):
            logger.info("Failed login attempt")
            raise InvalidCredentials()
        return user
