from typing import List, Optional

from pydantic import BaseModel

from blctl.client.base_client import BaseServiceClient, require_id


class VPC(BaseModel):
    id: int
    urn: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    region: Optional[str] = None
    ip_range: Optional[str] = None
    created_at: Optional[str] = None
    default: Optional[bool] = None


class VPCsClient(BaseServiceClient):
    base_path = 'v2/vpcs'

    def list(self) -> List[VPC]:
        """ List all VPCs """
        return self._list(self.base_path, 'vpcs', VPC).items

    def get(self, vpc_id: int) -> VPC:
        return self._get_object(f'{self.base_path}/{require_id("vpc_id", vpc_id)}', 'vpc', VPC)

    def delete(self, vpc_id: int):
        self._delete(f'{self.base_path}/{require_id("vpc_id", vpc_id)}')
