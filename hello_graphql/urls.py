from django.conf import settings
from django.urls import path
from django.views.decorators.csrf import csrf_exempt
from graphene_django.views import GraphQLView

from greeting.views import ClientPageView


urlpatterns = [
    path("", csrf_exempt(GraphQLView.as_view(graphiql=settings.GRAPHIQL)), name="graphql"),
    path("client/", ClientPageView.as_view(), name="client"),
]
