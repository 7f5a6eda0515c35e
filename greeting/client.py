import json
import logging

import requests


logger = logging.getLogger(__name__)

GREETING_QUERY = "query { greeting }"

DEFAULT_API_URL = "http://localhost:9000/"


class GreetingClientError(Exception):
    pass


class GraphQLResponseError(GreetingClientError):
    """Raised when the server answers with a GraphQL ``errors`` envelope."""

    def __init__(self, errors):
        self.errors = errors
        messages = "; ".join(error.get("message", "") for error in errors)
        super().__init__(f"GraphQL request failed: {messages}")


def build_request_body(query: str = GREETING_QUERY) -> str:
    return json.dumps({"query": query})


class GreetingClient:
    """
    Posts GraphQL documents to the greeting server.

    Transport failures and non-JSON bodies are not caught here; they reach
    the caller as the exceptions ``requests`` raises.
    """

    def __init__(self, api_url: str = DEFAULT_API_URL):
        self.api_url = api_url

    def execute(self, query: str) -> dict:
        logger.info("POST %s", self.api_url)
        response = requests.post(
            self.api_url,
            data=build_request_body(query),
            headers={"Content-Type": "application/json"},
        )
        payload = response.json()
        logger.debug("response: %s", payload)

        errors = payload.get("errors")
        if errors:
            raise GraphQLResponseError(errors)
        return payload

    def fetch_greeting(self) -> str:
        data = self.execute(GREETING_QUERY)["data"]
        return data["greeting"]
