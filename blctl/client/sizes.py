from typing import List, Optional

from pydantic import BaseModel

from blctl.client.base_client import BaseServiceClient


class Size(BaseModel):
    slug: str
    description: Optional[str] = None
    memory: Optional[int] = None
    vcpus: Optional[int] = None
    disk: Optional[int] = None
    transfer: Optional[float] = None
    price_monthly: Optional[float] = None
    price_hourly: Optional[float] = None
    regions: Optional[List[str]] = None
    available: Optional[bool] = None


class SizesClient(BaseServiceClient):
    def list(self) -> List[Size]:
        """ List all server sizes """
        return self._list('v2/sizes', 'sizes', Size).items
