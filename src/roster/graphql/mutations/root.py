"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.responses import (
    AddUserMutationResponse,
    DeleteUserMutationResponse,
    UpdateUserEmailMutationResponse,
    UpdateUserNameMutationResponse,
)


# Input types for mutations
@strawberry.input
class NewUserInput:
    """Input for adding a new user."""

    name: str | None = strawberry.field(default=None, description="Full name of user")
    email: str | None = strawberry.field(default=None, description="Email of user")


@strawberry.type(description="All the Mutations we can do")
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(
        name="addUser",
        description="POST: accepts {name: string, email: string}\nreturns a User type",
    )
    def add_user(
        self, info: strawberry.Info, user: NewUserInput | None = None
    ) -> AddUserMutationResponse | None:
        from ..resolvers.user import add_user

        return add_user(info, user)

    @strawberry.mutation(
        name="deleteUser",
        description="DELETE: accepts ID\nreturns boolean of success",
    )
    def delete_user(
        self, info: strawberry.Info, id: strawberry.ID
    ) -> DeleteUserMutationResponse | None:
        from ..resolvers.user import delete_user

        return delete_user(info, id)

    @strawberry.mutation(
        name="updateUserEmail",
        description="UPDATE: accepts ID, and new email\nreturns User",
    )
    def update_user_email(
        self, info: strawberry.Info, id: strawberry.ID, email: str
    ) -> UpdateUserEmailMutationResponse | None:
        from ..resolvers.user import update_user_email

        return update_user_email(info, id, email)

    @strawberry.mutation(
        name="updateUserName",
        description="UPDATE: accepts ID, and new name\nreturns User",
    )
    def update_user_name(
        self, info: strawberry.Info, id: strawberry.ID, name: str
    ) -> UpdateUserNameMutationResponse | None:
        from ..resolvers.user import update_user_name

        return update_user_name(info, id, name)
