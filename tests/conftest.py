"""Shared pytest fixtures for the server and client tests."""

import socket

import pytest
from graphene_django.utils.testing import graphql_query


@pytest.fixture
def client_query(client):
    """Run a GraphQL document against the root endpoint through the Django test client."""

    def func(*args, **kwargs):
        return graphql_query(*args, **kwargs, client=client, graphql_url="/")

    return func


@pytest.fixture
def api_url(live_server):
    return f"{live_server.url}/"


@pytest.fixture
def unreachable_url():
    """URL of a local port nothing is listening on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}/"
