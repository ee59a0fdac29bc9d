"""
Modelos de error que viajan en la cabecera HTTP ``errors``.

Ambos formatos se serializan como un arreglo JSON compacto. Se escapan los
caracteres no ASCII porque el valor termina en una cabecera HTTP.
"""
import json
from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

ERRORS_HEADER = "errors"


def _dump_header_json(items: List[dict]) -> str:
    return json.dumps(items, ensure_ascii=True, separators=(",", ":"))


class ErrorMessage(BaseModel):
    """Un único mensaje legible, p. ej. ``[{"message":"Missing owner id"}]``."""
    message: str

    def to_json(self) -> str:
        return _dump_header_json([self.model_dump()])


class BindingError(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    object_name: Optional[str] = Field(None, alias="objectName")
    field_name: Optional[str] = Field(None, alias="fieldName")
    field_value: Optional[str] = Field(None, alias="fieldValue")
    error_message: Optional[str] = Field(None, alias="errorMessage")


class BindingErrorsResponse(BaseModel):
    """Agrega los errores de validación por campo de un payload."""
    binding_errors: List[BindingError] = Field(default_factory=list)

    def add_error(self, error: BindingError) -> None:
        self.binding_errors.append(error)

    def add_all_errors(
        self,
        errors: Iterable[dict[str, Any]],
        object_name: Optional[str] = None,
    ) -> None:
        """
        Agrega los errores producidos por pydantic/FastAPI.

        Args:
            errors: Diccionarios con ``loc``, ``msg``, ``type`` e ``input``
                (formato de ``ValidationError.errors()``)
            object_name: Nombre del objeto validado. Si se omite, el primer
                elemento de ``loc`` (``body``, ``path``, ``query``) se usa como
                nombre y el resto como ruta del campo.
        """
        for err in errors:
            loc = [str(part) for part in err.get("loc", ())]
            source = object_name
            if source is None and loc:
                source, loc = loc[0], loc[1:]
            field_name = ".".join(loc) or None
            # en un campo ausente `input` es el objeto padre, no el valor rechazado
            if err.get("type") == "missing" or err.get("input") is None:
                field_value = None
            else:
                field_value = str(err.get("input"))
            self.add_error(BindingError(
                object_name=source,
                field_name=field_name,
                field_value=field_value,
                error_message=err.get("msg"),
            ))

    def to_json(self) -> str:
        items = []
        for error in self.binding_errors:
            data = error.model_dump(by_alias=True, exclude_none=True)
            items.append({k: v for k, v in data.items() if v != ""})
        return _dump_header_json(items)
