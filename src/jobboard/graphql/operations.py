"""
Operation dispatch table and selection-set shaping.

``OPERATIONS`` maps every public operation name to its handler, and
``FIELD_RESOLVERS`` maps computed ``(type, field)`` pairs to functions of
the parent object. ``shape`` walks a nested selection and calls a field
resolver only for the fields that are selected. The Strawberry schema
calls the same handlers, so both entry points share one behaviour.

Example::

    await run_operation(
        "job",
        auth_context,
        {"id": None, "title": None, "company": {"id": None, "name": None}},
        id="f3k9...",
    )
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..auth.context import AuthContext
from ..logging import get_logger
from .errors import NotAuthorizedError, UnknownFieldError, UnknownOperationError
from .resolvers.company import resolve_company_by_id, resolve_company_jobs
from .resolvers.job import (
    create_job,
    delete_job,
    resolve_job_by_id,
    resolve_job_company,
    resolve_job_date,
    resolve_jobs,
    update_job,
)

logger = get_logger(__name__)

Handler = Callable[..., Awaitable[Any]]
FieldResolver = Callable[[Any], Any]
Selection = Mapping[str, "Selection | None"]


class OperationKind(Enum):
    QUERY = "query"
    MUTATION = "mutation"


@dataclass(frozen=True)
class Operation:
    name: str
    kind: OperationKind
    handler: Handler
    requires_auth: bool = False


OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in (
        Operation("company", OperationKind.QUERY, resolve_company_by_id),
        Operation("job", OperationKind.QUERY, resolve_job_by_id),
        Operation("jobs", OperationKind.QUERY, resolve_jobs),
        Operation("createJob", OperationKind.MUTATION, create_job, requires_auth=True),
        Operation("deleteJob", OperationKind.MUTATION, delete_job, requires_auth=True),
        Operation("updateJob", OperationKind.MUTATION, update_job, requires_auth=True),
    )
}

FIELD_RESOLVERS: dict[tuple[str, str], FieldResolver] = {
    ("Job", "date"): resolve_job_date,
    ("Job", "company"): resolve_job_company,
    ("Company", "jobs"): resolve_company_jobs,
}


def get_operation(name: str) -> Operation:
    try:
        return OPERATIONS[name]
    except KeyError:
        raise UnknownOperationError(name) from None


async def execute_operation(name: str, auth_context: AuthContext, /, **arguments: Any) -> Any:
    """
    Dispatch a named operation to its handler.

    Raises:
        UnknownOperationError: If ``name`` is not in the table
        NotAuthorizedError: If the operation needs a user and there is none
    """
    operation = get_operation(name)

    if operation.requires_auth and not auth_context.is_authenticated:
        logger.info("Unauthenticated operation rejected", operation=name)
        raise NotAuthorizedError("Missing authentication")

    logger.debug("Executing operation", operation=name, kind=operation.kind.value)
    return await operation.handler(auth_context, **arguments)


def public_fields(parent: Any) -> dict[str, str]:
    """GraphQL field name to attribute name for the schema-visible fields of ``parent``.

    ``strawberry.Private`` attributes are not part of the type definition and
    never appear here.
    """
    definition = getattr(type(parent), "__strawberry_definition__", None)
    if definition is None:
        return {}

    names: dict[str, str] = {}
    for f in definition.fields:
        names[f.python_name] = f.python_name
        if f.graphql_name:
            names[f.graphql_name] = f.python_name
    return names


async def resolve_field(parent: Any, field: str) -> Any:
    """
    Value of one selected field: a registered field resolver, else the plain attribute.

    Raises:
        UnknownFieldError: If the type exposes no field of that name
    """
    type_name = type(parent).__name__
    resolver = FIELD_RESOLVERS.get((type_name, field))
    if resolver is None:
        attribute = public_fields(parent).get(field)
        if attribute is None:
            raise UnknownFieldError(type_name, field)
        return getattr(parent, attribute)

    value = resolver(parent)
    if inspect.isawaitable(value):
        value = await value
    return value


async def shape(value: Any, selection: Selection) -> Any:
    """
    Project a resolved value onto a selection into plain dicts and lists.

    List items are shaped concurrently; nothing is deduplicated across them.
    """
    if value is None:
        return None

    if isinstance(value, list):
        return list(await asyncio.gather(*(shape(item, selection) for item in value)))

    result: dict[str, Any] = {}
    for field, sub_selection in selection.items():
        child = await resolve_field(value, field)
        result[field] = child if sub_selection is None else await shape(child, sub_selection)
    return result


async def run_operation(
    name: str, auth_context: AuthContext, selection: Selection, /, **arguments: Any
) -> Any:
    """Execute an operation and shape its result onto ``selection``."""
    return await shape(await execute_operation(name, auth_context, **arguments), selection)
