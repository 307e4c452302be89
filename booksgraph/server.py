import json
import logging

import flask

from . import config, entities
from .graph import create_graph, execute
from .graphql import InvalidDocumentResult, operation_type


logger = logging.getLogger(__name__)


def create_app(config_overrides=None, store=None):
    app = flask.Flask(__name__)
    config.configure(app, config_overrides)

    if store is None:
        store = entities.create_store()

    @app.errorhandler(InvalidRequest)
    def handle_invalid_request(error):
        response = flask.jsonify({"errors": [{"message": error.message}]})
        response.status_code = error.status_code
        if error.status_code == 405:
            response.headers["Allow"] = "POST"
        return response

    @app.route("/graphql", methods=["GET", "POST"])
    def graphql_endpoint():
        request = flask.request

        if request.method == "GET" and app.config["GRAPHIQL"] and _prefers_html(request):
            return flask.render_template(
                "graphiql.html",
                endpoint=flask.url_for("graphql_endpoint"),
                query=request.args.get("query", ""),
            )

        params = _read_params(request)

        if request.method == "GET" and operation_type(params.query, params.operation_name) == "mutation":
            raise InvalidRequest("Can only perform a mutation operation from a POST request.", status_code=405)

        logger.debug("executing GraphQL operation %r", params.operation_name)
        result = execute(
            params.query,
            graph=create_graph(store=store),
            variables=params.variables,
            operation_name=params.operation_name,
        )

        response = {"data": result.data}
        if result.errors:
            response["errors"] = [error.formatted for error in result.errors]

        if isinstance(result, InvalidDocumentResult):
            status_code = 400
        else:
            status_code = 200

        return flask.jsonify(response), status_code

    return app


class InvalidRequest(Exception):
    def __init__(self, message, status_code=400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class GraphQLParams(object):
    def __init__(self, query, variables, operation_name):
        self.query = query
        self.variables = variables
        self.operation_name = operation_name


def _read_params(request):
    if request.method == "POST":
        body = _read_body(request)
    else:
        body = {}

    query = request.args.get("query", body.get("query"))
    if not isinstance(query, str) or not query:
        raise InvalidRequest("Must provide query string.")

    variables = _read_variables(request.args.get("variables", body.get("variables")))
    operation_name = request.args.get("operationName", body.get("operationName")) or None

    return GraphQLParams(query=query, variables=variables, operation_name=operation_name)


def _read_body(request):
    if request.mimetype == "application/graphql":
        return {"query": request.get_data(as_text=True)}

    elif request.mimetype == "application/json":
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            raise InvalidRequest("POST body must be a JSON object.")
        return body

    elif request.mimetype in ("application/x-www-form-urlencoded", "multipart/form-data"):
        return request.form.to_dict()

    else:
        return {}


def _read_variables(variables):
    if not variables:
        return None

    if isinstance(variables, str):
        try:
            variables = json.loads(variables)
        except ValueError:
            raise InvalidRequest("Variables are invalid JSON.")

    if not isinstance(variables, dict):
        raise InvalidRequest("Variables must be an object.")

    return variables


def _prefers_html(request):
    best_match = request.accept_mimetypes.best_match(("application/json", "text/html"))
    return best_match == "text/html"
