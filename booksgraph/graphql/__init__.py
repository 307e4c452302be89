import logging

import graphql
from graphql import ExecutionResult, GraphQLError
from graphql.utilities import get_operation_ast

from .schema import create_graphql_schema


logger = logging.getLogger(__name__)


def execute(document_text, *, graph, query_type, mutation_type=None, variables=None, operation_name=None):
    return executor(
        query_type=query_type,
        mutation_type=mutation_type,
    )(document_text, graph=graph, variables=variables, operation_name=operation_name)


def executor(*, query_type, mutation_type=None):
    graphql_schema = create_graphql_schema(query_type=query_type, mutation_type=mutation_type)

    def execute(document_text, *, graph, variables=None, operation_name=None):
        try:
            document = graphql.parse(document_text)
        except GraphQLError as error:
            return InvalidDocumentResult(data=None, errors=[error])

        validation_errors = graphql.validate(graphql_schema.graphql_schema, document)
        if validation_errors:
            return InvalidDocumentResult(data=None, errors=validation_errors)

        result = graphql.execute_sync(
            graphql_schema.graphql_schema,
            document,
            context_value=graph,
            variable_values=variables,
            operation_name=operation_name,
        )
        if result.errors:
            for error in result.errors:
                logger.warning("error executing GraphQL operation: %s", error)

        return result

    execute.schema = graphql_schema

    return execute


class InvalidDocumentResult(ExecutionResult):
    """
    The result of a document that could not be parsed or failed validation,
    and so was never executed.
    """
    __slots__ = ()


def operation_type(document_text, operation_name=None):
    """
    Find the type of the operation that would be executed for a document,
    such as "query" or "mutation". Returns None if the document cannot be
    parsed or the operation cannot be determined.
    """
    try:
        document = graphql.parse(document_text)
    except GraphQLError:
        return None

    operation = get_operation_ast(document, operation_name)
    if operation is None:
        return None
    else:
        return operation.operation.value
