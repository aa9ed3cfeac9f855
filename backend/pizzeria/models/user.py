# pizzeria/models/user.py
"""
Database model for users.
Represents an account that can log in and obtain access tokens.
"""
from tortoise import fields, models

class User(models.Model):
    """
    User database model.

    Users are only created through /registro; no update or delete is exposed.

    Security:
    - Password is stored as an argon2 hash (never store plain text passwords)
    - Username uniqueness is enforced by the unique index, not only by the
      registration handler's lookup
    """
    id = fields.IntField(pk=True)  # Primary key: auto-increment user identifier
    username = fields.CharField(
        max_length=255,
        unique=True,
        index=True
    )  # User login name (must be unique, indexed for fast lookups)
    password_hash = fields.CharField(max_length=255)  # Hashed password, never returned by the API
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "usuarios"  # Database table name

    def __str__(self) -> str:
        return self.username
