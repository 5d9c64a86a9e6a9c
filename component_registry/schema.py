"""Project-wide GraphQL schema; app queries are composed here."""

import graphene

from apps.components.schema import Query as ComponentsQuery


class Query(ComponentsQuery, graphene.ObjectType):
    pass


schema = graphene.Schema(query=Query)
