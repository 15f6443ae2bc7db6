"""
Builders for mutation response envelopes
"""

from typing import TypeVar

from .types.responses import MutationResponse
from .types.user import User

CODE_OK = "200"
CODE_BAD_REQUEST = "400"
CODE_NOT_FOUND = "404"

ResponseT = TypeVar("ResponseT", bound=MutationResponse)


def build_response(
    response_type: type[ResponseT],
    code: str,
    success: bool,
    message: str,
    user: User | None = None,
) -> ResponseT:
    """Construct a mutation response of the given type.

    Raises:
        TypeError: If a user is given for a response type without a user field
    """
    if user is None:
        return response_type(code=code, success=success, message=message)

    if "user" not in getattr(response_type, "__dataclass_fields__", {}):
        raise TypeError(f"{response_type.__name__} does not carry a user")

    return response_type(code=code, success=success, message=message, user=user)


def success_response(
    response_type: type[ResponseT], message: str, user: User | None = None
) -> ResponseT:
    return build_response(response_type, CODE_OK, True, message, user)


def not_found_response(response_type: type[ResponseT]) -> ResponseT:
    return build_response(response_type, CODE_NOT_FOUND, False, "user not found")


def invalid_input_response(response_type: type[ResponseT], message: str) -> ResponseT:
    return build_response(response_type, CODE_BAD_REQUEST, False, message)
