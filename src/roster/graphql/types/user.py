"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...store import UserRecord


@strawberry.type(description="the type of a user")
class User:
    """User type for GraphQL API."""

    name: str = strawberry.field(description="Full name of user")
    email: str = strawberry.field(description="Email address of user")
    id: strawberry.ID = strawberry.field(description="a unique id")

    @classmethod
    def from_record(cls, record: "UserRecord") -> "User":
        return cls(name=record.name, email=record.email, id=strawberry.ID(record.id))
