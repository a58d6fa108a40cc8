from typing import List, Optional

from pydantic import BaseModel

from blctl.client.base_client import BaseServiceClient, require_id
from blctl.client.regions import Region


class ForwardingRule(BaseModel):
    entry_protocol: Optional[str] = None
    entry_port: Optional[int] = None
    target_protocol: Optional[str] = None
    target_port: Optional[int] = None
    certificate_id: Optional[str] = None
    tls_passthrough: Optional[bool] = None


class HealthCheck(BaseModel):
    protocol: Optional[str] = None
    port: Optional[int] = None
    path: Optional[str] = None
    check_interval_seconds: Optional[int] = None
    response_timeout_seconds: Optional[int] = None
    healthy_threshold: Optional[int] = None
    unhealthy_threshold: Optional[int] = None


class StickySessions(BaseModel):
    type: Optional[str] = None
    cookie_name: Optional[str] = None
    cookie_ttl_seconds: Optional[int] = None


class LoadBalancer(BaseModel):
    id: int
    name: Optional[str] = None
    ip: Optional[str] = None
    size: Optional[str] = None
    algorithm: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    forwarding_rules: Optional[List[ForwardingRule]] = None
    health_check: Optional[HealthCheck] = None
    sticky_sessions: Optional[StickySessions] = None
    region: Optional[Region] = None
    server_ids: Optional[List[int]] = None
    tag: Optional[str] = None
    tags: Optional[List[str]] = None
    redirect_http_to_https: Optional[bool] = None
    enable_proxy_protocol: Optional[bool] = None
    enable_backend_keepalive: Optional[bool] = None
    vpc_id: Optional[int] = None


class LoadBalancersClient(BaseServiceClient):
    base_path = 'v2/load_balancers'

    def list(self) -> List[LoadBalancer]:
        """ List all load balancers """
        return self._list(self.base_path, 'load_balancers', LoadBalancer).items

    def get(self, load_balancer_id: int) -> LoadBalancer:
        return self._get_object(f'{self.base_path}/{require_id("load_balancer_id", load_balancer_id)}',
                                'load_balancer',
                                LoadBalancer)

    def delete(self, load_balancer_id: int):
        self._delete(f'{self.base_path}/{require_id("load_balancer_id", load_balancer_id)}')
