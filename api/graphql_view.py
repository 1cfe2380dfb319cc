from flask import Blueprint, current_app
from strawberry.flask.views import GraphQLView

from .schema import schema

bp = Blueprint("graphql", __name__)


class BookstoreGraphQLView(GraphQLView):
    """
    GraphQL endpoint (queries and mutations)
    ---
    tags:
      - GraphQL
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            query: { type: string, example: "{ books { id title author { name } } }" }
            variables: { type: object }
            operationName: { type: string }
    responses:
      200:
        description: GraphQL response with data and/or errors
    """

    def get_context(self, request, response):
        # Hand the app-owned store to every resolver
        return {
            "request": request,
            "response": response,
            "storage": current_app.extensions["storage"],
            "delete_policy": current_app.config.get("AUTHOR_DELETE_POLICY", "cascade"),
        }


@bp.record_once
def _register_view(state):
    state.add_url_rule(
        "/graphql",
        view_func=BookstoreGraphQLView.as_view(
            "graphql",
            schema=schema,
            graphql_ide="graphiql" if state.app.config.get("GRAPHIQL", False) else None,
        ),
    )
