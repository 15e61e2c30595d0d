"""Session and token records."""

from __future__ import annotations

from pydantic import Field

from .common import LaxInt, Record


class SessionKeyUser(Record):
    user_id: str = Field("", alias="userID")
    user_name: str = Field("", alias="userName")
    employee_name: str = Field("", alias="employeeName")
    employee_id: str = Field("", alias="employeeID")
    group_id: str = Field("", alias="groupID")
    group_name: str = Field("", alias="groupName")
    ip_address: str = Field("", alias="ipAddress")
    session_key: str = Field("", alias="sessionKey")
    session_length: LaxInt = Field(0, alias="sessionLength")
    login_url: str = Field("", alias="loginUrl")
    berlin_pos_version: str = Field("", alias="berlinPOSVersion")
    berlin_pos_assets_url: str = Field("", alias="berlinPOSAssetsURL")
    epsi_url: str = Field("", alias="epsiURL")
    identity_token: str = Field("", alias="identityToken")
    token: str = Field("", alias="token")


class SessionKeyInfo(Record):
    creation_unix_time: str = Field("", alias="creationUnixTime")
    expire_unix_time: str = Field("", alias="expireUnixTime")


class SessionInfo(Record):
    session_key: str = Field("", alias="sessionKey")


class IdentityToken(Record):
    jwt: str = Field("", alias="identityToken")


class JwtToken(Record):
    token: str = Field("", alias="token")
