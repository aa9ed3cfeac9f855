# pizzeria/models/empleado.py
"""
Database model for pizzeria employees.
"""
from tortoise import fields, models

class Empleado(models.Model):
    id = fields.IntField(pk=True)
    nombre = fields.CharField(max_length=255)
    puesto = fields.CharField(max_length=64, null=True)  # Job title, e.g. "cocinero", "repartidor"
    sueldo = fields.DecimalField(max_digits=10, decimal_places=2)  # Monthly salary
    telefono = fields.CharField(max_length=32, null=True)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "empleados"
