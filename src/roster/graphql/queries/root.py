"""
Root GraphQL query definitions
"""

import strawberry

from ..types.user import User


@strawberry.type(description="All the queries we can do")
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="Get all users")
    def users(self, info: strawberry.Info) -> list[User] | None:
        from ..resolvers.user import resolve_users

        return resolve_users(info)

    @strawberry.field(description="a test function, returns 'cool beans!'")
    def test(self) -> str | None:
        from ..resolvers.user import resolve_test

        return resolve_test()

    @strawberry.field(
        description=(
            "a test function\n"
            "accept a 'word' string variable\n"
            "return the same string, reversed"
        )
    )
    def repeat(self, word: str | None = None) -> str | None:
        from ..resolvers.user import resolve_repeat

        return resolve_repeat(word)
