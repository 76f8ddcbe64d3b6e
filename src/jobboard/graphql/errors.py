"""
Error taxonomy for GraphQL resolvers.

Structured errors carry a stable ``extensions.code`` so clients can branch
on the failure kind without matching message text. Anything else raised by
a resolver (database faults and the like) propagates unchanged.
"""

from graphql import GraphQLError


class ResolverError(GraphQLError):
    """Base class for errors that reach the client with a machine-readable code."""

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message, extensions={"code": self.code})


class NotFoundError(ResolverError):
    """The entity does not exist, or exists outside the caller's company."""

    code = "NOT_FOUND"


class NotAuthorizedError(ResolverError):
    """The operation needs an authenticated user and the request has none."""

    code = "NOT_AUTHORIZED"


class UnknownOperationError(KeyError):
    """Raised when the dispatch table has no handler for an operation name."""


class UnknownFieldError(KeyError):
    """Raised when a selection names a field the GraphQL type does not expose."""

    def __init__(self, type_name: str, field: str):
        super().__init__(f"{type_name} has no field {field!r}")
        self.type_name = type_name
        self.field = field
