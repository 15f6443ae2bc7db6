from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

import strawberry

from ...config import settings
from ...logging import get_logger
from ..envelope import invalid_input_response, not_found_response, success_response
from ..types.responses import (
    AddUserMutationResponse,
    DeleteUserMutationResponse,
    UpdateUserEmailMutationResponse,
    UpdateUserNameMutationResponse,
)
from ..types.user import User

if TYPE_CHECKING:
    from ...store import UserStore
    from ..mutations.root import NewUserInput

logger = get_logger(__name__)

TEST_REPLY = "cool beans!"


def get_store(info: strawberry.Info) -> UserStore:
    """Extract the user store from the GraphQL context."""
    store = info.context.get("store")
    if store is None:
        raise RuntimeError("User store not found in GraphQL context")
    return store


# Query resolvers
def resolve_users(info: strawberry.Info) -> list[User]:
    return [User.from_record(record) for record in get_store(info).list_all()]


def resolve_test() -> str:
    return TEST_REPLY


def resolve_repeat(word: str | None) -> str | None:
    """Reverse ``word`` code point by code point."""
    if word is None:
        return None
    return word[::-1]


# Mutation resolvers
def add_user(info: strawberry.Info, user: NewUserInput | None) -> AddUserMutationResponse:
    """
    Add a user under the next free id.

    Missing fields are stored as empty strings unless the service is configured
    to require them.
    """
    name = user.name if user else None
    email = user.email if user else None

    if settings.require_user_fields and not (name and name.strip() and email and email.strip()):
        logger.info("User rejected", has_name=bool(name), has_email=bool(email))
        return invalid_input_response(AddUserMutationResponse, "name and email are required")

    record = get_store(info).insert(name or "", email or "")

    logger.info("User added", user_id=record.id)

    return success_response(AddUserMutationResponse, "user added", User.from_record(record))


def delete_user(info: strawberry.Info, id: str) -> DeleteUserMutationResponse:
    store = get_store(info)

    with store.transaction():
        index = store.find_index_by_id(id)
        if index is None:
            logger.info("User not found for delete", user_id=id)
            return not_found_response(DeleteUserMutationResponse)

        store.remove_at(index)

    logger.info("User removed", user_id=id)

    return success_response(DeleteUserMutationResponse, "user removed")


def update_user_email(
    info: strawberry.Info, id: str, email: str
) -> UpdateUserEmailMutationResponse:
    """
    Return a copy of the user with the email replaced.

    The stored user is left as it was.
    """
    store = get_store(info)

    with store.transaction():
        index = store.find_index_by_id(id)
        if index is None:
            logger.info("User not found for email update", user_id=id)
            return not_found_response(UpdateUserEmailMutationResponse)

        updated = replace(store.get(index), email=email)

    logger.info("User email updated", user_id=id)

    return success_response(
        UpdateUserEmailMutationResponse, "user updates", User.from_record(updated)
    )


def update_user_name(info: strawberry.Info, id: str, name: str) -> UpdateUserNameMutationResponse:
    """
    Return a copy of the user with the name replaced.

    The stored user is left as it was.
    """
    store = get_store(info)

    with store.transaction():
        index = store.find_index_by_id(id)
        if index is None:
            logger.info("User not found for name update", user_id=id)
            return not_found_response(UpdateUserNameMutationResponse)

        updated = replace(store.get(index), name=name)

    logger.info("User name updated", user_id=id)

    return success_response(
        UpdateUserNameMutationResponse, "user updates", User.from_record(updated)
    )
