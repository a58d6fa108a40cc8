from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from blctl.client.base_client import BaseServiceClient, require_id, require_text


class InboundRule(BaseModel):
    protocol: Optional[str] = None
    ports: Optional[str] = None
    sources: Optional[Dict[str, Any]] = None


class OutboundRule(BaseModel):
    protocol: Optional[str] = None
    ports: Optional[str] = None
    destinations: Optional[Dict[str, Any]] = None


class Firewall(BaseModel):
    id: str
    name: Optional[str] = None
    status: Optional[str] = None
    inbound_rules: Optional[List[InboundRule]] = None
    outbound_rules: Optional[List[OutboundRule]] = None
    server_ids: Optional[List[int]] = None
    tags: Optional[List[str]] = None
    created_at: Optional[str] = None
    pending_changes: Optional[List[Dict[str, Any]]] = None


class FirewallsClient(BaseServiceClient):
    base_path = 'v2/firewalls'

    def list(self) -> List[Firewall]:
        """ List all firewalls """
        return self._list(self.base_path, 'firewalls', Firewall).items

    def list_by_server(self, server_id: int) -> List[Firewall]:
        """ List the firewalls applied to the given server """
        return self._list(f'v2/servers/{require_id("server_id", server_id)}/firewalls', 'firewalls', Firewall).items

    def get(self, firewall_id: str) -> Firewall:
        return self._get_object(f'{self.base_path}/{require_text("firewall_id", firewall_id)}', 'firewall', Firewall)

    def delete(self, firewall_id: str):
        self._delete(f'{self.base_path}/{require_text("firewall_id", firewall_id)}')
