"""Dispatch errors.

Every rejected dispatch surfaces as one error kind, `UnsupportedTypeError`,
whose message has a fixed shape so that logs and front ends can rely on it:

    <op_name> not implemented for '<type display name>'
"""

from __future__ import annotations


class DispatchError(Exception):
    """Base class for errors raised by the dispatch machinery."""

    pass


class UnsupportedTypeError(DispatchError, RuntimeError):
    """Raised when a scalar type has no binding in the active profile.

    Also raised when the type is bound but the platform cannot run it.

    Attributes:
        op_name: Name of the operation being dispatched.
        type_name: Display name of the rejected scalar type.
    """

    def __init__(self, op_name: str, type_name: str) -> None:
        super().__init__(f"{op_name} not implemented for '{type_name}'")
        self.op_name = op_name
        self.type_name = type_name


class ProfileBuildError(DispatchError, ValueError):
    """Raised when a dispatch profile cannot be constructed."""

    pass


def report(op_name: str, type_name: str) -> UnsupportedTypeError:
    """Build (not raise) the error for a rejected type."""
    return UnsupportedTypeError(op_name, type_name)
