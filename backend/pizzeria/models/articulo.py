# pizzeria/models/articulo.py
"""
Database model for inventory articles (ingredients, drinks, supplies).
"""
from tortoise import fields, models

class Articulo(models.Model):
    id = fields.IntField(pk=True)
    descripcion = fields.CharField(max_length=255)
    precio = fields.DecimalField(max_digits=10, decimal_places=2)  # Unit price
    existencia = fields.IntField(default=0)  # Units in stock
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "articulos"
