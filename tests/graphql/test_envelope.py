"""
Tests for mutation response builders
"""

import pytest

from roster.graphql.envelope import (
    CODE_NOT_FOUND,
    CODE_OK,
    build_response,
    invalid_input_response,
    not_found_response,
    success_response,
)
from roster.graphql.types.responses import (
    AddUserMutationResponse,
    DeleteUserMutationResponse,
    MutationResponse,
    UpdateUserEmailMutationResponse,
    UpdateUserNameMutationResponse,
)
from roster.graphql.types.user import User

RESPONSE_TYPES = [
    AddUserMutationResponse,
    DeleteUserMutationResponse,
    UpdateUserEmailMutationResponse,
    UpdateUserNameMutationResponse,
]


@pytest.mark.parametrize("response_type", RESPONSE_TYPES)
def test_all_responses_share_interface(response_type):
    response = not_found_response(response_type)

    assert isinstance(response, MutationResponse)
    assert (response.code, response.success, response.message) == (
        CODE_NOT_FOUND,
        False,
        "user not found",
    )


def test_success_with_user():
    user = User(id="5", name="n", email="e")

    response = success_response(UpdateUserNameMutationResponse, "user updates", user)

    assert response.code == CODE_OK
    assert response.success is True
    assert response.user is user


def test_success_without_user():
    response = success_response(DeleteUserMutationResponse, "user removed")

    assert response == DeleteUserMutationResponse(
        code="200", success=True, message="user removed"
    )
    assert not hasattr(response, "user")


def test_user_refused_for_delete_response():
    with pytest.raises(TypeError):
        build_response(DeleteUserMutationResponse, "200", True, "x", User(id="1", name="a", email="b"))


def test_invalid_input():
    response = invalid_input_response(AddUserMutationResponse, "bad")

    assert response.code == "400"
    assert response.success is False
    assert response.user is None
