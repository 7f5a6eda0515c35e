from hello_graphql.schema import Query, schema


def test_greeting_query_returns_hello_world():
    result = schema.execute("query { greeting }")

    assert result.errors is None
    assert result.data == {"greeting": "Hello world!"}


def test_unknown_field_is_reported_as_error():
    result = schema.execute("query { nonexistentField }")

    assert result.errors
    assert result.data is None


def test_resolver_is_idempotent():
    query = Query()

    values = {query.resolve_greeting(None) for _ in range(5)}

    assert values == {"Hello world!"}


def test_schema_exposes_only_greeting():
    graphql_schema = schema.graphql_schema

    assert list(graphql_schema.query_type.fields) == ["greeting"]
    assert str(graphql_schema.query_type.fields["greeting"].type) == "String"
    assert graphql_schema.query_type.fields["greeting"].args == {}
    assert graphql_schema.mutation_type is None
    assert graphql_schema.subscription_type is None
