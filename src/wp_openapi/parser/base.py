"""Data models for a WordPress REST API index document.

These mirror the JSON served at ``/wp-json``. Only the keys the
converter reads are modelled; everything else WordPress emits
(``validate_callback``, ``context``, ``_links``...) is ignored.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _empty_list_as_map(value):
    # PHP encodes an empty associative array as []
    if isinstance(value, list) and not value:
        return {}
    return value


class ArgumentItems(BaseModel):
    """Item type of an array-valued argument."""

    type: str | list[str] | None = None


class WordPressArgument(BaseModel):
    """A single declared argument of an endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    type: str | list[str] | None = None  # one type, or candidates (first wins)
    description: str | None = None
    required: bool | None = None
    enum: list[Any] | None = None
    default: Any = None
    items: ArgumentItems | None = None
    maximum: int | float | None = None
    minimum: int | float | None = None
    format: str | None = None
    schema_: Any = Field(default=None, alias="schema")

    @field_validator("enum", mode="before")
    @classmethod
    def enum_as_list(cls, value):
        # PHP encodes an array with gaps in its keys as an object
        if isinstance(value, dict):
            return list(value.values())
        return value

    @property
    def has_default(self) -> bool:
        """True when ``default`` was present in the source, even as null."""
        return "default" in self.model_fields_set


class WordPressEndpoint(BaseModel):
    """One endpoint of a route: a set of methods sharing an argument map."""

    methods: list[str] = []
    description: str | None = None
    args: dict[str, WordPressArgument] = {}

    @field_validator("args", mode="before")
    @classmethod
    def args_as_map(cls, value):
        return _empty_list_as_map(value)


class WordPressRoute(BaseModel):
    namespace: str = ""
    methods: list[str] = []
    endpoints: list[WordPressEndpoint] = []


class WordPressSchema(BaseModel):
    """The whole ``/wp-json`` index."""

    name: str = ""
    description: str = ""
    url: str = ""
    home: str = ""
    namespaces: list[str] = []
    routes: dict[str, WordPressRoute] = {}

    @field_validator("routes", mode="before")
    @classmethod
    def routes_as_map(cls, value):
        return _empty_list_as_map(value)
