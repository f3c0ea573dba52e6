"""Request-scoped dependencies for the Ordering API.

Authentication happens upstream: the auth proxy verifies the session and
forwards the signed-in user as ``X-User-Id`` / ``X-User-Role`` headers, which
are trusted as-is here.
"""

from dataclasses import dataclass

from fastapi import Depends, Header, Request
from shared.errors import UnauthorizedError

from ordering.checkout.service import CheckoutService

ADMIN_ROLE = 1


@dataclass(frozen=True)
class UserRef:
    id: str
    role: int = 0

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


async def current_user(
    x_user_id: str = Header(default=""),
    x_user_role: int = Header(default=0),
) -> UserRef:
    if not x_user_id:
        raise UnauthorizedError()
    return UserRef(id=x_user_id, role=x_user_role)


async def admin_user(user: UserRef = Depends(current_user)) -> UserRef:
    if not user.is_admin:
        raise UnauthorizedError("UnAuthorized Access")
    return user


def checkout_service(request: Request) -> CheckoutService:
    return CheckoutService(request.app.state.payment_gateway)
