import requests
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from greeting.client import GreetingClient, GreetingClientError


class Command(BaseCommand):
    help = "Query the GraphQL server for its greeting and print it."

    def add_arguments(self, parser):
        parser.add_argument(
            "--url",
            default=settings.GREETING_API_URL,
            help="GraphQL endpoint to query (default: %(default)s).",
        )

    def handle(self, *args, **options):
        client = GreetingClient(options["url"])
        try:
            greeting = client.fetch_greeting()
        except (requests.RequestException, GreetingClientError) as exc:
            raise CommandError(f"Could not fetch greeting from {options['url']}: {exc}") from exc

        self.stdout.write(greeting)
