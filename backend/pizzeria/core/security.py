# pizzeria/core/security.py
"""
Security module for authentication.
Handles password hashing and signed, time-limited access tokens.
"""
import datetime as dt
import jwt  # PyJWT
from passlib.context import CryptContext

from pizzeria.schemas.auth import TokenClaims

# Password hashing context
# Argon2 salts every hash and is deliberately expensive to resist brute force
pwd_context = CryptContext(
    schemes=["argon2"],  # Use Argon2 for password hashing
    deprecated="auto",   # Automatically handle deprecated schemes
)

JWT_ALG = "HS256"  # JWT signing algorithm (HMAC SHA-256)
DEFAULT_TOKEN_TTL = dt.timedelta(hours=1)

def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string with its salt embedded (safe to store in database)

    Note: Hashing the same password twice yields two different digests.
    """
    return pwd_context.hash(plain)

def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Args:
        plain: Plain text password to verify
        hashed: Hashed password from database

    Returns:
        True if password matches, False otherwise (never raises for a wrong password)
    """
    return pwd_context.verify(plain, hashed)


class TokenError(Exception):
    """Base class for access token verification failures."""


class MalformedToken(TokenError):
    """Token cannot be decoded into a signed claims structure."""


class InvalidSignature(TokenError):
    """Signature does not match the current secret."""


class Expired(TokenError):
    """Token is past its embedded expiry."""


class TokenService:
    """
    Issues and verifies HS256 access tokens.

    The claims and the expiry are signed together as one JWT payload, so the
    expiry cannot be stripped or altered without breaking the signature.
    Tokens are not stored anywhere; there is no revocation, a token stays
    valid until it expires.
    """

    def __init__(self, secret: str, ttl: dt.timedelta = DEFAULT_TOKEN_TTL, algorithm: str = JWT_ALG):
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._secret = secret
        self.ttl = ttl
        self.algorithm = algorithm

    def issue(self, claims: TokenClaims) -> str:
        """
        Create a signed token for the given identity.

        Token payload includes:
            - id: User id
            - username: User login name
            - iat: Issued at timestamp
            - exp: Expiration timestamp (iat + ttl)
        """
        now = dt.datetime.now(dt.timezone.utc)
        payload = {
            "id": claims.id,
            "username": claims.username,
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token and return the identity claims it carries.

        Raises:
            MalformedToken: If the token cannot be decoded or lacks identity claims
            InvalidSignature: If the signature does not verify with the current secret
            Expired: If the current time is at or past the embedded expiry
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
        # InvalidSignatureError and ExpiredSignatureError must be caught before their base classes
        except jwt.InvalidSignatureError as exc:
            raise InvalidSignature(str(exc)) from exc
        except jwt.ExpiredSignatureError as exc:
            raise Expired(str(exc)) from exc
        except jwt.InvalidTokenError as exc:
            raise MalformedToken(str(exc)) from exc

        try:
            return TokenClaims(id=payload["id"], username=payload["username"])
        except (KeyError, ValueError) as exc:
            raise MalformedToken("token payload lacks identity claims") from exc
