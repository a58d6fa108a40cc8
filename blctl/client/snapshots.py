from typing import List, Optional, Union

from pydantic import BaseModel

from blctl.client.base_client import BaseServiceClient, require_text


class Snapshot(BaseModel):
    id: Union[int, str]
    name: Optional[str] = None
    created_at: Optional[str] = None
    regions: Optional[List[str]] = None
    resource_id: Optional[Union[int, str]] = None
    resource_type: Optional[str] = None
    min_disk_size: Optional[int] = None
    size_gigabytes: Optional[float] = None
    tags: Optional[List[str]] = None


class SnapshotResourceType:
    SERVER = 'server'
    VOLUME = 'volume'


class SnapshotsClient(BaseServiceClient):
    """ Snapshots of every server and volume of the account """
    base_path = 'v2/snapshots'

    def list(self, resource_type: Optional[str] = None) -> List[Snapshot]:
        params = dict(resource_type=resource_type) if resource_type else None
        return self._list(self.base_path, 'snapshots', Snapshot, params=params).items

    def list_server(self) -> List[Snapshot]:
        return self.list(SnapshotResourceType.SERVER)

    def list_volume(self) -> List[Snapshot]:
        return self.list(SnapshotResourceType.VOLUME)

    def get(self, snapshot_id: str) -> Snapshot:
        return self._get_object(f'{self.base_path}/{require_text("snapshot_id", snapshot_id)}', 'snapshot', Snapshot)

    def delete(self, snapshot_id: str):
        self._delete(f'{self.base_path}/{require_text("snapshot_id", snapshot_id)}')
