"""
Tests for the `errors` header payloads.
"""

import json

import pytest
from pydantic import ValidationError

from models.errors import ErrorMessage, BindingError, BindingErrorsResponse
from models.pets import PetDto


def _validation_errors(payload):
    with pytest.raises(ValidationError) as exc_info:
        PetDto.model_validate(payload)
    return exc_info.value.errors()


class TestErrorMessage:

    def test_json_compacto(self):
        assert ErrorMessage(message="Missing owner id").to_json() == '[{"message":"Missing owner id"}]'

    def test_escapa_no_ascii(self):
        """Header values must stay ASCII."""
        header = ErrorMessage(message="Mascota no válida").to_json()

        assert header == '[{"message":"Mascota no v\\u00e1lida"}]'
        assert json.loads(header)[0]["message"] == "Mascota no válida"


class TestBindingErrorsResponse:

    def test_errores_de_validacion(self):
        response = BindingErrorsResponse()
        response.add_all_errors(
            _validation_errors({"name": "", "birthDate": "yesterday"}),
            object_name="petDto",
        )

        errors = json.loads(response.to_json())
        by_field = {e["fieldName"]: e for e in errors}

        assert set(by_field) == {"name", "birthDate"}
        assert all(e["objectName"] == "petDto" for e in errors)
        assert by_field["birthDate"]["fieldValue"] == "yesterday"
        # empty values are omitted from the payload
        assert "fieldValue" not in by_field["name"]
        assert by_field["name"]["errorMessage"]

    def test_campos_ausentes_sin_valor(self):
        response = BindingErrorsResponse()
        response.add_all_errors(_validation_errors({}), object_name="petDto")

        errors = json.loads(response.to_json())

        assert {e["fieldName"] for e in errors} == {"name", "birthDate"}
        assert all("fieldValue" not in e for e in errors)

    def test_origen_desde_loc(self):
        """Without object_name the first `loc` element names the source."""
        response = BindingErrorsResponse()
        response.add_all_errors([
            {"loc": ("path", "pet_id"), "msg": "Input should be a valid integer", "type": "int_parsing", "input": "abc"},
        ])

        assert json.loads(response.to_json()) == [{
            "objectName": "path",
            "fieldName": "pet_id",
            "fieldValue": "abc",
            "errorMessage": "Input should be a valid integer",
        }]

    def test_omite_miembros_vacios(self):
        response = BindingErrorsResponse()
        response.add_error(BindingError(object_name="petDto", field_name="", error_message="invalid"))

        assert response.to_json() == '[{"objectName":"petDto","errorMessage":"invalid"}]'

    def test_sin_errores(self):
        assert BindingErrorsResponse().to_json() == "[]"
