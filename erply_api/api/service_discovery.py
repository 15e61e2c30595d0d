from __future__ import annotations

from typing import Optional

from ..bulk import first_record
from ..models.service_discovery import ServiceEndpoints
from .base import ApiMixin


class ServiceDiscoveryMixin(ApiMixin):

    async def get_service_endpoints(self) -> Optional[ServiceEndpoints]:
        """Fetch the URLs of the account's other Erply services (PIM, WMS, ...)."""
        res = await self._call("getServiceEndpoints")
        return first_record(res, ServiceEndpoints)
