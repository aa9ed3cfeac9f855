# pizzeria/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Defines request/response models for registration, login and token claims.
"""
from pydantic import BaseModel

class CredentialsIn(BaseModel):
    """
    Request model for /registro and /login.
    Both fields are optional at the schema level so that a missing field is
    reported by the handler as a 400, not by the framework.
    """
    username: str | None = None  # User login name
    password: str | None = None  # User password (plain text, hashed server-side)

class RegisterOut(BaseModel):
    """
    Response model for a successful registration.
    Never contains the password hash.
    """
    message: str
    userId: int
    username: str

class LoginOut(BaseModel):
    """
    Response model for a successful login.
    """
    message: str
    token: str  # Bearer token for the Authorization header

class TokenClaims(BaseModel):
    """
    Identity claims embedded and signed inside an access token.
    """
    id: int  # User id
    username: str  # User login name
