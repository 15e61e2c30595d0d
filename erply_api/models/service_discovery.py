"""Service endpoint records returned by getServiceEndpoints."""

from __future__ import annotations

from pydantic import Field

from .common import Record


class Endpoint(Record):
    url: str = Field("", alias="url")
    documentation: str = Field("", alias="documentation")


class ServiceEndpoints(Record):
    cafa: Endpoint = Field(default_factory=Endpoint, alias="cafa")
    pim: Endpoint = Field(default_factory=Endpoint, alias="pim")
    wms: Endpoint = Field(default_factory=Endpoint, alias="wms")
    promotion: Endpoint = Field(default_factory=Endpoint, alias="promotion")
    reports: Endpoint = Field(default_factory=Endpoint, alias="reports")
    json_api: Endpoint = Field(default_factory=Endpoint, alias="json")
    assignments: Endpoint = Field(default_factory=Endpoint, alias="assignments")
