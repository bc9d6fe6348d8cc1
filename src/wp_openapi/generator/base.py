"""Swagger 2.0 output models.

The converter builds these and the CLI serializes them with
``to_swagger()``, which emits only the fields that were actually set,
under their Swagger key names.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ParameterLocation(str, Enum):
    PATH = "path"
    QUERY = "query"
    FORM_DATA = "formData"


class PathParameter(BaseModel):
    """A capture group found in a WordPress route pattern."""

    name: str
    type: str  # integer / string
    format: str | None = None


class ParameterItems(BaseModel):
    type: str
    enum: list[Any] | None = None
    default: Any = None


class SwaggerParameter(BaseModel):
    """A single non-body Swagger parameter."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    name: str
    in_: ParameterLocation = Field(alias="in")
    description: str = ""
    required: bool = False
    type: str
    format: str | None = None
    items: ParameterItems | None = None
    collection_format: str | None = Field(default=None, alias="collectionFormat")
    maximum: int | float | None = None
    minimum: int | float | None = None
    schema_: Any = Field(default=None, alias="schema")

    def to_swagger(self) -> dict:
        # name/in/description/required/type are always emitted
        data = {
            "name": self.name,
            "in": self.in_,
            "description": self.description,
            "required": self.required,
            "type": self.type,
        }
        data.update(self.model_dump(by_alias=True, exclude_unset=True))
        return data


class SwaggerOperation(BaseModel):
    """One method entry of a Swagger path item."""

    model_config = ConfigDict(populate_by_name=True)

    tags: list[str] = []
    summary: str = ""
    description: str = ""
    operation_id: str = Field(alias="operationId")
    consumes: list[str] = []
    produces: list[str] = []
    parameters: list[SwaggerParameter] = []
    responses: dict[str, Any] = {}
    security: list[Any] = []

    def to_swagger(self) -> dict:
        data = self.model_dump(by_alias=True, exclude={"parameters"})
        data["parameters"] = [p.to_swagger() for p in self.parameters]
        return data


class SwaggerInfo(BaseModel):
    title: str
    version: str
    description: str = ""


class SwaggerDocument(BaseModel):
    """Top-level Swagger 2.0 document."""

    model_config = ConfigDict(populate_by_name=True)

    swagger: str = "2.0"
    info: SwaggerInfo
    host: str = ""
    base_path: str = Field(default="/", alias="basePath")
    schemes: list[str] = []
    consumes: list[str] = []
    produces: list[str] = []
    tags: list[dict[str, Any]] = []
    paths: dict[str, dict[str, SwaggerOperation]] = {}
    definitions: dict[str, Any] = {}
    security_definitions: dict[str, Any] = Field(default={}, alias="securityDefinitions")
    external_docs: dict[str, Any] = Field(default={}, alias="externalDocs")

    def to_swagger(self) -> dict:
        data = self.model_dump(by_alias=True, exclude={"paths"})
        data["paths"] = {
            path: {method: op.to_swagger() for method, op in item.items()}
            for path, item in self.paths.items()
        }
        return data
