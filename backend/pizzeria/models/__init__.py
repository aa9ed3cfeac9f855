"""
Database models module initialization.
Exports all database models for convenient imports throughout the application.

Models exported:
- User: Account used for registration, login and token issuance
- Cliente: Pizzeria client
- Proveedor: Supplier
- Articulo: Inventory article
- Empleado: Employee
"""
from .user import User
from .cliente import Cliente
from .proveedor import Proveedor
from .articulo import Articulo
from .empleado import Empleado
