"""Builds Swagger parameters from WordPress argument declarations.

WordPress argument metadata is often incomplete, so every field falls
back to a sensible default instead of failing.
"""

from wp_openapi.generator.base import ParameterItems, ParameterLocation, SwaggerParameter
from wp_openapi.parser.base import WordPressArgument

FORM_METHODS = ("post", "put")


def build_parameters(
    endpoint: str, args: dict[str, WordPressArgument | dict], method: str
) -> list[SwaggerParameter]:
    """Build one parameter per declared argument, in declaration order."""
    return [build_parameter(name, method, endpoint, detail) for name, detail in args.items()]


def build_parameter(
    name: str, method: str, endpoint: str, detail: WordPressArgument | dict
) -> SwaggerParameter:
    """Build the Swagger parameter for one argument.

    ``endpoint`` is the already rewritten Swagger path; an argument whose
    name appears in it as ``{name}`` is a path parameter.
    """
    if not isinstance(detail, WordPressArgument):
        detail = WordPressArgument.model_validate(detail)

    param_type = _infer_type(name, detail)
    location = _infer_location(name, method, endpoint)

    required = bool(detail.required)
    if location == ParameterLocation.PATH:
        required = True

    fields = {
        "name": name,
        "in_": location,
        "description": detail.description or "",
        "required": required,
        "type": param_type,
    }

    if detail.enum is not None:
        fields["type"] = "array"
        item_type = "string" if isinstance(detail.type, list) else param_type
        items = {"type": item_type, "enum": detail.enum}
        if detail.has_default:
            items["default"] = detail.default
        fields["items"] = ParameterItems(**items)
        fields["collection_format"] = "multi"
    elif detail.items is not None:
        fields["items"] = ParameterItems(type=_first(detail.items.type) or "string")

    if detail.maximum is not None:
        fields["maximum"] = detail.maximum
    if detail.minimum is not None:
        fields["minimum"] = detail.minimum

    if detail.format:
        fields["format"] = detail.format
    elif param_type == "integer":
        fields["format"] = "int64"

    if "schema_" in detail.model_fields_set:
        fields["schema_"] = detail.schema_

    return SwaggerParameter(**fields)


def _infer_type(name: str, detail: WordPressArgument) -> str:
    declared = _first(detail.type)
    if declared:
        return declared
    if "_id" in name or name.lower() == "id":
        return "integer"
    return "string"


def _infer_location(name: str, method: str, endpoint: str) -> ParameterLocation:
    if f"{{{name}}}" in endpoint:
        return ParameterLocation.PATH
    if method.lower() in FORM_METHODS:
        return ParameterLocation.FORM_DATA
    return ParameterLocation.QUERY


def _first(value: str | list[str] | None) -> str | None:
    """Collapse a type declaration to one name; lists yield their first entry."""
    if isinstance(value, list):
        return value[0] if value else None
    return value
