from passlib.context import CryptContext

from app.config import settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


class Hasher:
    @staticmethod
    def _truncate_password(password: str) -> str:
        """Cut to 72 bytes without splitting a multi-byte UTF-8 character."""
        encoded = password.encode("utf-8")
        if len(encoded) <= BCRYPT_MAX_BYTES:
            return password
        return encoded[:BCRYPT_MAX_BYTES].decode("utf-8", errors="ignore")

    @staticmethod
    def hash_password(password: str) -> str:
        return pwd_context.hash(Hasher._truncate_password(password))

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        return pwd_context.verify(Hasher._truncate_password(plain_password), hashed_password)
