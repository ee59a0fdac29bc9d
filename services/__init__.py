"""
Capa de servicio para la lógica de negocio.
Este paquete contiene los servicios que orquestan las operaciones entre repositorios.
"""

from .clinic_service import ClinicService

__all__ = [
    "ClinicService",
]
