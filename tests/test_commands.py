from io import StringIO

import pytest
from django.core.management import CommandError, call_command, get_commands

from greeting.management.commands.runserver import Command as RunserverCommand


def test_fetch_greeting_prints_greeting(api_url):
    out = StringIO()

    call_command("fetch_greeting", url=api_url, stdout=out)

    assert out.getvalue() == "Hello world!\n"


def test_fetch_greeting_fails_without_server(unreachable_url):
    with pytest.raises(CommandError, match="Could not fetch greeting"):
        call_command("fetch_greeting", url=unreachable_url, stdout=StringIO())


def test_runserver_defaults_to_port_9000():
    assert get_commands()["runserver"] == "greeting"
    assert RunserverCommand.default_port == "9000"
