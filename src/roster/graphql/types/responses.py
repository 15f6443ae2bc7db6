"""
Mutation response GraphQL type definitions

Every mutation answers with a type implementing MutationResponse; only the
user-returning mutations add the optional ``user`` field.
"""

import strawberry

from .user import User


@strawberry.interface
class MutationResponse:
    """Shared shape of every mutation result."""

    code: str
    success: bool
    message: str


@strawberry.type
class AddUserMutationResponse(MutationResponse):
    user: User | None = None


@strawberry.type
class DeleteUserMutationResponse(MutationResponse):
    pass


@strawberry.type
class UpdateUserEmailMutationResponse(MutationResponse):
    user: User | None = None


@strawberry.type
class UpdateUserNameMutationResponse(MutationResponse):
    user: User | None = None
