"""Async GraphQL client for the job board API."""

from .queries import GraphQLRequestError, JobBoardClient

__all__ = ["GraphQLRequestError", "JobBoardClient"]
