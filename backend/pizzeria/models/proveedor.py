# pizzeria/models/proveedor.py
"""
Database model for suppliers of ingredients and goods.
"""
from tortoise import fields, models

class Proveedor(models.Model):
    id = fields.IntField(pk=True)
    nombre = fields.CharField(max_length=255)
    contacto = fields.CharField(max_length=255, null=True)  # Name of the contact person
    telefono = fields.CharField(max_length=32, null=True)
    correo = fields.CharField(max_length=255, null=True)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "proveedores"
