# pizzeria/core/db.py
"""
Database configuration and initialization module.
Handles Tortoise ORM setup and database connection lifecycle.
"""
import logging
from tortoise import Tortoise

from pizzeria.config import settings

logger = logging.getLogger("uvicorn.error")

MODEL_MODULES = [
    "pizzeria.models.user",       # User model (credential store)
    "pizzeria.models.cliente",    # Cliente model
    "pizzeria.models.proveedor",  # Proveedor model
    "pizzeria.models.articulo",   # Articulo model
    "pizzeria.models.empleado",   # Empleado model
]

def build_tortoise_config(db_url: str) -> dict:
    """
    Build the Tortoise ORM configuration dictionary for a connection URL.

    Args:
        db_url: Tortoise connection URL (sqlite://..., postgres://..., mysql://...)
    """
    return {
        "connections": {"default": db_url},
        "apps": {
            "models": {
                "models": MODEL_MODULES,
                "default_connection": "default",
            },
        },
    }

# Default configuration, derived from DATABASE_URL
TORTOISE_ORM = build_tortoise_config(settings.database_url)

async def init_db(config: dict | None = None, generate_schemas: bool = settings.generate_schemas):
    """
    Initialize Tortoise ORM database connection.

    This function should be called during application startup to establish
    the database connection and register all models. When generate_schemas
    is set, missing tables are created (existing ones are left untouched).
    """
    await Tortoise.init(config=config or TORTOISE_ORM)
    if generate_schemas:
        await Tortoise.generate_schemas(safe=True)
        logger.info("[db] schema synchronised")

async def close_db():
    """
    Close all database connections.

    This function should be called during application shutdown to properly
    clean up database connections and resources.
    """
    await Tortoise.close_connections()
