import graphene


GREETING = "Hello world!"


class Query(graphene.ObjectType):
    greeting = graphene.String(description="Greeting returned on every request.")

    def resolve_greeting(self, info) -> str:
        return GREETING
