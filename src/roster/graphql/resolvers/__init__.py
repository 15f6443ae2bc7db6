"""Resolver package for GraphQL schema.

Resolver functions backing the queries and mutations in ``queries.root`` and
``mutations.root``. They read and mutate the user store found in the GraphQL
context.
"""

# Intentionally empty; functions are defined in sibling modules.
