from api_typegen.parser.parameters import resolve_parameters, resolve_parameters_v2


class TestResolveParameters:
    def test_resolves_query_parameter(self):
        parameters = [{"name": "id", "in": "query", "schema": {"type": "string"}}]
        assert resolve_parameters("query", parameters, {}) == {"id": {"type": "string"}}

    def test_resolves_referenced_schema(self):
        parameters = [{"name": "sort", "in": "query", "schema": {"$ref": "#/components/schemas/Sort"}}]
        schemas = {"Sort": {"type": "string"}}
        assert resolve_parameters("query", parameters, schemas) == {"sort": {"type": "string"}}

    def test_none_parameters(self):
        assert resolve_parameters("query", None, {}) is None

    def test_empty_parameters(self):
        assert resolve_parameters("query", [], {}) is None

    def test_no_parameters_of_kind(self):
        parameters = [{"name": "id", "in": "path", "schema": {"type": "string"}}]
        assert resolve_parameters("query", parameters, {}) is None

    def test_null_schema(self):
        parameters = [{"name": "id", "in": "query", "schema": None}]
        assert resolve_parameters("query", parameters, {"id": {"type": "string"}}) is None

    def test_ignores_body_and_header(self):
        parameters = [
            {"name": "payload", "in": "body", "schema": {"type": "object"}},
            {"name": "X-Trace", "in": "header", "schema": {"type": "string"}},
            {"name": "id", "in": "path", "schema": {"type": "integer"}},
        ]
        assert resolve_parameters("path", parameters, {}) == {"id": {"type": "integer"}}

    def test_v3_ignores_bare_type(self):
        parameters = [{"name": "limit", "in": "query", "type": "integer"}]
        assert resolve_parameters("query", parameters, {}) is None


    def test_unnamed_parameter_skipped(self):
        parameters = [
            {"in": "query", "schema": {"type": "string"}},
            {"name": "id", "in": "query", "schema": {"type": "string"}},
        ]
        assert resolve_parameters("query", parameters, {}) == {"id": {"type": "string"}}


class TestResolveParametersV2:
    def test_bare_type(self):
        parameters = [{"name": "limit", "in": "query", "type": "integer"}]
        assert resolve_parameters_v2("query", parameters, {}) == {"limit": {"type": "integer"}}

    def test_bare_array_type_keeps_items(self):
        parameters = [{"name": "tags", "in": "query", "type": "array", "items": {"type": "string"}}]
        assert resolve_parameters_v2("query", parameters, {}) == {
            "tags": {"type": "array", "items": {"type": "string"}},
        }

    def test_schema_is_resolved(self):
        parameters = [{"name": "filter", "in": "query", "schema": {"$ref": "#/definitions/Filter"}}]
        schemas = {"Filter": {"type": "object", "properties": {"q": {"type": "string"}}}}
        assert resolve_parameters_v2("query", parameters, schemas) == {"filter": schemas["Filter"]}

    def test_missing_type_and_schema(self):
        parameters = [{"name": "limit", "in": "query"}]
        assert resolve_parameters_v2("query", parameters, {}) is None

    def test_none_and_empty(self):
        assert resolve_parameters_v2("path", None, {}) is None
        assert resolve_parameters_v2("path", [], {}) is None

    def test_body_parameter_ignored(self):
        parameters = [{"name": "body", "in": "body", "schema": {"type": "object"}}]
        assert resolve_parameters_v2("query", parameters, {}) is None

    def test_unnamed_parameter_skipped(self):
        parameters = [{"in": "path", "type": "string"}, {"name": "", "in": "path", "schema": {"type": "string"}}]
        assert resolve_parameters_v2("path", parameters, {}) is None
