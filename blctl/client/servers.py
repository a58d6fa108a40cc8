from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from blctl.client.actions import Action
from blctl.client.base_client import BaseServiceClient, require_id, require_text
from blctl.client.images import Image
from blctl.client.regions import Region
from blctl.client.sizes import Size


class Kernel(BaseModel):
    id: int
    name: Optional[str] = None
    version: Optional[str] = None


class NetworkV4(BaseModel):
    ip_address: Optional[str] = None
    netmask: Optional[str] = None
    gateway: Optional[str] = None
    type: Optional[str] = None


class NetworkV6(BaseModel):
    ip_address: Optional[str] = None
    netmask: Optional[int] = None
    gateway: Optional[str] = None
    type: Optional[str] = None


class Networks(BaseModel):
    v4: List[NetworkV4] = []
    v6: List[NetworkV6] = []


class Server(BaseModel):
    id: int
    name: Optional[str] = None
    memory: Optional[int] = None
    vcpus: Optional[int] = None
    disk: Optional[int] = None
    region: Optional[Region] = None
    image: Optional[Image] = None
    size: Optional[Size] = None
    size_slug: Optional[str] = None
    backup_ids: Optional[List[int]] = None
    next_backup_window: Optional[Dict[str, Any]] = None
    snapshot_ids: Optional[List[int]] = None
    features: Optional[List[str]] = None
    locked: Optional[bool] = None
    status: Optional[str] = None
    networks: Optional[Networks] = None
    created_at: Optional[str] = None
    kernel: Optional[Kernel] = None
    tags: Optional[List[str]] = None
    volume_ids: Optional[List[str]] = None
    vpc_id: Optional[int] = None

    def public_ipv4(self) -> Optional[str]:
        return self.__find_address('v4', 'public')

    def private_ipv4(self) -> Optional[str]:
        return self.__find_address('v4', 'private')

    def public_ipv6(self) -> Optional[str]:
        return self.__find_address('v6', 'public')

    def __find_address(self, version: str, interface_type: str) -> Optional[str]:
        if not self.networks:
            return None

        for network in getattr(self.networks, version):
            if network.type == interface_type:
                return network.ip_address

        return None


class ServersClient(BaseServiceClient):
    base_path = 'v2/servers'

    def list(self) -> List[Server]:
        """ List all servers """
        return self._list(self.base_path, 'servers', Server).items

    def list_by_tag(self, tag_name: str) -> List[Server]:
        """ List all servers with the given tag """
        return self._list(self.base_path,
                          'servers',
                          Server,
                          params=dict(tag_name=require_text('tag_name', tag_name))).items

    def get(self, server_id: int) -> Server:
        return self._get_object(f'{self.base_path}/{require_id("server_id", server_id)}', 'server', Server)

    def delete(self, server_id: int):
        self._delete(f'{self.base_path}/{require_id("server_id", server_id)}')

    def delete_by_tag(self, tag_name: str):
        """ Delete every server with the given tag """
        self._delete(self.base_path, params=dict(tag_name=require_text('tag_name', tag_name)))

    def kernels(self, server_id: int) -> List[Kernel]:
        return self._list(f'{self.base_path}/{require_id("server_id", server_id)}/kernels', 'kernels', Kernel).items

    def snapshots(self, server_id: int) -> List[Image]:
        return self._list(f'{self.base_path}/{require_id("server_id", server_id)}/snapshots', 'snapshots', Image).items

    def backups(self, server_id: int) -> List[Image]:
        return self._list(f'{self.base_path}/{require_id("server_id", server_id)}/backups', 'backups', Image).items

    def actions(self, server_id: int) -> List[Action]:
        return self._list(f'{self.base_path}/{require_id("server_id", server_id)}/actions', 'actions', Action).items

    def neighbors(self, server_id: int) -> List[Server]:
        """ List the servers sharing the same physical host (not paginated by the API) """
        return self._get_list(f'{self.base_path}/{require_id("server_id", server_id)}/neighbors', 'servers', Server)
