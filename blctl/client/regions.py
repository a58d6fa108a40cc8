from typing import List, Optional

from pydantic import BaseModel

from blctl.client.base_client import BaseServiceClient


class Region(BaseModel):
    slug: str
    name: Optional[str] = None
    sizes: Optional[List[str]] = None
    available: Optional[bool] = None
    features: Optional[List[str]] = None


class RegionsClient(BaseServiceClient):
    def list(self) -> List[Region]:
        """ List all regions """
        return self._list('v2/regions', 'regions', Region).items
