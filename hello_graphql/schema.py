import graphene
from greeting.schema import Query as GreetingQuery


class Query(GreetingQuery, graphene.ObjectType):
    """Root Query; the greeting app's ``greeting`` field is its only field."""
    pass


schema = graphene.Schema(query=Query)
