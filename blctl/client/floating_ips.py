from typing import List, Optional

from pydantic import BaseModel

from blctl.client.actions import Action
from blctl.client.base_client import BaseServiceClient, require_id, require_text
from blctl.client.regions import Region
from blctl.client.servers import Server


class FloatingIP(BaseModel):
    ip: str
    region: Optional[Region] = None
    server: Optional[Server] = None


class FloatingIPsClient(BaseServiceClient):
    base_path = 'v2/floating_ips'

    def list(self) -> List[FloatingIP]:
        """ List all floating IPs """
        return self._list(self.base_path, 'floating_ips', FloatingIP).items

    def get(self, ip: str) -> FloatingIP:
        return self._get_object(f'{self.base_path}/{require_text("ip", ip)}', 'floating_ip', FloatingIP)

    def delete(self, ip: str):
        self._delete(f'{self.base_path}/{require_text("ip", ip)}')


class FloatingIPActionsClient(BaseServiceClient):
    def list(self, ip: str) -> List[Action]:
        """ List the actions performed on the given floating IP """
        return self._list(f'v2/floating_ips/{require_text("ip", ip)}/actions', 'actions', Action).items

    def get(self, ip: str, action_id: int) -> Action:
        return self._get_object(f'v2/floating_ips/{require_text("ip", ip)}/actions/'
                                f'{require_id("action_id", action_id)}',
                                'action',
                                Action)
