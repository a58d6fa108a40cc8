from typing import Optional

from pydantic import BaseModel

from blctl.client.base_client import BaseServiceClient


class Account(BaseModel):
    server_limit: Optional[int] = None
    floating_ip_limit: Optional[int] = None
    volume_limit: Optional[int] = None
    email: Optional[str] = None
    uuid: Optional[str] = None
    email_verified: Optional[bool] = None
    status: Optional[str] = None
    status_message: Optional[str] = None


class Balance(BaseModel):
    month_to_date_balance: Optional[str] = None
    account_balance: Optional[str] = None
    month_to_date_usage: Optional[str] = None
    generated_at: Optional[str] = None


class AccountClient(BaseServiceClient):
    def get(self) -> Account:
        return self._get_object('v2/account', 'account', Account)

    def get_balance(self) -> Balance:
        """ Get the balance of the account (the API does not wrap it in an envelope) """
        return self._get_object('v2/customers/my/balance', None, Balance)
