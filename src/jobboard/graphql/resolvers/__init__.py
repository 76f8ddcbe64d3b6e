"""Resolver package for the GraphQL schema.

Every handler takes the request's AuthContext explicitly as its first
argument; field resolvers take only their parent object.
"""
