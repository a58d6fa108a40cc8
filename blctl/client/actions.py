from typing import List, Optional

from pydantic import BaseModel

from blctl.client.base_client import BaseServiceClient, require_id
from blctl.client.regions import Region


class Action(BaseModel):
    id: int
    status: Optional[str] = None
    type: Optional[str] = None
    started_at: Optional[str] = None
    completed_at: Optional[str] = None
    resource_id: Optional[int] = None
    resource_type: Optional[str] = None
    region: Optional[Region] = None
    region_slug: Optional[str] = None


class ActionsClient(BaseServiceClient):
    def list(self) -> List[Action]:
        """ List every action performed on the account """
        return self._list('v2/actions', 'actions', Action).items

    def get(self, action_id: int) -> Action:
        return self._get_object(f'v2/actions/{require_id("action_id", action_id)}', 'action', Action)
