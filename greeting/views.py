import logging

from django.conf import settings
from django.views.generic import TemplateView

from .client import GreetingClient


logger = logging.getLogger(__name__)

GREETING_ELEMENT_ID = "api-response"


class ClientPageView(TemplateView):
    """
    Fetches the greeting over HTTP and renders it into ``#api-response``.

    The request goes back to ``GREETING_API_URL``, usually this same server,
    so the page needs a threaded or multi-worker server. Under
    ``runserver --nothreading`` or a single sync worker it waits on itself.
    """

    template_name = "greeting/index.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        client = GreetingClient(settings.GREETING_API_URL)
        greeting = client.fetch_greeting()
        logger.info("Rendering greeting into #%s", GREETING_ELEMENT_ID)
        context["element_id"] = GREETING_ELEMENT_ID
        context["greeting"] = greeting
        return context
