from wp_openapi.generator.base import SwaggerParameter, ParameterItems
from wp_openapi.parser.base import WordPressArgument, WordPressEndpoint, WordPressSchema


class TestWordPressArgument:
    def test_empty_argument(self):
        arg = WordPressArgument()
        assert arg.type is None
        assert arg.required is None
        assert arg.has_default is False

    def test_type_candidates(self):
        arg = WordPressArgument.model_validate({"type": ["string", "null"]})
        assert arg.type == ["string", "null"]

    def test_schema_alias(self):
        arg = WordPressArgument.model_validate({"schema": {"type": "object"}})
        assert arg.schema_ == {"type": "object"}

    def test_explicit_null_default_is_declared(self):
        arg = WordPressArgument.model_validate({"default": None})
        assert arg.has_default is True

    def test_keyed_enum_becomes_list(self):
        arg = WordPressArgument.model_validate({"enum": {"0": "a", "2": "b"}})
        assert arg.enum == ["a", "b"]

    def test_unknown_keys_ignored(self):
        arg = WordPressArgument.model_validate({"type": "string", "validate_callback": "rest_validate", "context": ["view"]})
        assert arg.type == "string"


class TestWordPressEndpoint:
    def test_empty_php_array_args(self):
        ep = WordPressEndpoint.model_validate({"methods": ["GET"], "args": []})
        assert ep.args == {}

    def test_args_keep_declaration_order(self):
        ep = WordPressEndpoint.model_validate({"methods": ["GET"], "args": {"b": {}, "a": {}, "c": {}}})
        assert list(ep.args) == ["b", "a", "c"]


class TestWordPressSchema:
    def test_empty_routes(self):
        schema = WordPressSchema.model_validate({"name": "Blog", "routes": []})
        assert schema.routes == {}


class TestSwaggerParameter:
    def test_populate_by_alias(self):
        p = SwaggerParameter.model_validate({"name": "id", "in": "path", "required": True, "type": "integer"})
        assert p.in_ == "path"

    def test_unset_optionals_omitted(self):
        p = SwaggerParameter(name="q", in_="query", type="string")
        data = p.to_swagger()
        assert data == {"name": "q", "in": "query", "description": "", "required": False, "type": "string"}

    def test_items_and_collection_format_aliases(self):
        p = SwaggerParameter(
            name="status",
            in_="query",
            type="array",
            items=ParameterItems(type="string", enum=["publish"]),
            collection_format="multi",
        )
        data = p.to_swagger()
        assert data["collectionFormat"] == "multi"
        assert data["items"] == {"type": "string", "enum": ["publish"]}
