"""
Inventory resources served by the generic CRUD router.
"""
import dataclasses
from fastapi import APIRouter
from pizzeria.api.v1.crud import CrudResource, build_crud_router
from pizzeria.models import Articulo, Cliente, Empleado, Proveedor

RESOURCES = (
    CrudResource(
        model=Cliente,
        path="clientes",
        label="Cliente",
        fields=("nombre", "correo", "telefono", "direccion"),
        required=("nombre", "correo"),
    ),
    CrudResource(
        model=Proveedor,
        path="proveedores",
        label="Proveedor",
        fields=("nombre", "contacto", "telefono", "correo"),
        required=("nombre",),
    ),
    CrudResource(
        model=Articulo,
        path="articulos",
        label="Artículo",
        fields=("descripcion", "precio", "existencia"),
        required=("descripcion", "precio", "existencia"),
        field_labels={"descripcion": "descripción"},
    ),
    CrudResource(
        model=Empleado,
        path="empleados",
        label="Empleado",
        fields=("nombre", "puesto", "sueldo", "telefono"),
        required=("nombre", "sueldo"),
    ),
)

def build_inventory_routers(protected: set[str]) -> list[APIRouter]:
    """
    One router per resource; resources whose path is in `protected` are
    guarded by the Bearer token gate.
    """
    routers = []
    for resource in RESOURCES:
        if resource.path in protected:
            resource = dataclasses.replace(resource, auth_required=True)
        routers.append(build_crud_router(resource))
    return routers
