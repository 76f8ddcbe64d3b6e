"""GraphQL layer: schema, resolvers and the operation dispatch table."""
