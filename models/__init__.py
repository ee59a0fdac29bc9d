from .pets import PetDto, PetTypeDto, VisitDto, MIN_ID, MAX_ID
from .errors import ERRORS_HEADER, ErrorMessage, BindingError, BindingErrorsResponse
from .common import HealthCheckResponse

__all__ = [
    # Mascotas
    "PetDto", "PetTypeDto", "VisitDto", "MIN_ID", "MAX_ID",
    # Errores
    "ERRORS_HEADER", "ErrorMessage", "BindingError", "BindingErrorsResponse",
    # Common responses
    "HealthCheckResponse",
]
