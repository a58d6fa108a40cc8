from typing import List, Optional

from pydantic import BaseModel

from blctl.client.base_client import BaseServiceClient


class BillingHistoryEntry(BaseModel):
    description: Optional[str] = None
    amount: Optional[str] = None
    invoice_id: Optional[str] = None
    invoice_uuid: Optional[str] = None
    date: Optional[str] = None
    type: Optional[str] = None


class BillingHistory(BaseModel):
    billing_history: List[BillingHistoryEntry] = []


class BillingHistoryClient(BaseServiceClient):
    def list(self) -> BillingHistory:
        """ List every billing history entry of the account """
        collection = self._list('v2/customers/my/billing_history', 'billing_history', BillingHistoryEntry)
        return BillingHistory(billing_history=collection.items)
