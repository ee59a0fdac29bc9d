""" Utilidades principales y componentes compartidos para la aplicación.

Este paquete contiene:

- Excepciones personalizadas
- Roles y predicados de autorización
"""

from .exceptions import (
    AppException,
    ForbiddenException,
    DatabaseException,
)
from .security import (
    Role,
    has_role,
    check_predicate,
)

__all__ = [
    # Excepciones
    "AppException",
    "ForbiddenException",
    "DatabaseException",
    # seguridad
    "Role",
    "has_role",
    "check_predicate",
]
