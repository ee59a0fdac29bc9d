"""
Utilidades de seguridad: roles y predicados de autorización.

Un predicado recibe el usuario autenticado y devuelve True si puede continuar.
La cadena de autorización (``auth.authorize``) los evalúa antes de despachar
el handler.
"""

from enum import Enum
from typing import Callable

from core.exceptions import ForbiddenException


class Role(str, Enum):
    owner_admin = "owner_admin"
    vet_admin = "vet_admin"
    admin = "admin"


RolePredicate = Callable[[object], bool]


def has_role(*allowed_roles: Role) -> RolePredicate:
    """
    Construye un predicado que acepta usuarios con alguno de los roles dados.

    Args:
        allowed_roles: Roles permitidos

    Returns:
        Función ``predicate(user) -> bool``
    """
    allowed = {Role(r).value for r in allowed_roles}

    def predicate(user) -> bool:
        return getattr(user, "role", None) in allowed

    predicate.__name__ = f"has_role({', '.join(sorted(allowed))})"
    return predicate


def check_predicate(user, predicate: RolePredicate) -> None:
    """
    Aplica un predicado de autorización sobre el usuario.

    Raises:
        ForbiddenException: Si el predicado rechaza al usuario
    """
    if not predicate(user):
        raise ForbiddenException(
            details={
                "user_role": getattr(user, "role", None),
                "predicate": getattr(predicate, "__name__", repr(predicate)),
            }
        )
