"""Session and token requests.

These calls look up or exchange credentials. Building the credentials
themselves (storing passwords, refreshing sessions) is left to the caller:
a successful :meth:`AuthMixin.verify_user` returns the session key, and
``client.with_session_key(user.session_key)`` gives a client that uses it.
"""

from __future__ import annotations

from typing import Optional

from ..bulk import first_record, object_record
from ..models.auth import (
    IdentityToken,
    JwtToken,
    SessionInfo,
    SessionKeyInfo,
    SessionKeyUser,
)
from ..options import merge_params
from .base import ApiMixin


class AuthMixin(ApiMixin):

    async def verify_user(
        self,
        username: str,
        password: str,
        session_length: Optional[int] = None,
    ) -> Optional[SessionKeyUser]:
        """Log in with username and password and open a new session."""
        params = merge_params(
            None,
            username=username,
            password=password,
            sessionLength=session_length,
        )
        res = await self._call("verifyUser", params)
        return first_record(res, SessionKeyUser)

    async def switch_user(self, pin: str) -> Optional[SessionKeyUser]:
        """Switch the session to the user owning ``pin``."""
        res = await self._call("switchUser", {"pin": pin})
        return first_record(res, SessionKeyUser)

    async def get_session_key_user(self) -> Optional[SessionKeyUser]:
        res = await self._call("getSessionKeyUser")
        return first_record(res, SessionKeyUser)

    async def get_session_key_info(self) -> Optional[SessionKeyInfo]:
        res = await self._call("getSessionKeyInfo")
        return first_record(res, SessionKeyInfo)

    async def get_identity_token(self) -> Optional[IdentityToken]:
        res = await self._call("getIdentityToken")
        return object_record(res, IdentityToken)

    async def get_jwt_token(self) -> Optional[JwtToken]:
        res = await self._call("getJWTToken")
        return object_record(res, JwtToken)

    async def verify_identity_token(self, jwt: str) -> Optional[SessionInfo]:
        """Exchange an identity token for a session key."""
        res = await self._call("verifyIdentityToken", {"jwt": jwt})
        return object_record(res, SessionInfo)
