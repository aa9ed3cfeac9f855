# pizzeria/models/cliente.py
"""
Database model for pizzeria clients.
"""
from tortoise import fields, models

class Cliente(models.Model):
    id = fields.IntField(pk=True)
    nombre = fields.CharField(max_length=255)
    correo = fields.CharField(max_length=255, unique=True)  # Contact email, one client per address
    telefono = fields.CharField(max_length=32, null=True)
    direccion = fields.CharField(max_length=255, null=True)  # Delivery address
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "clientes"
