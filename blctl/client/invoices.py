from typing import List, Optional

from pydantic import BaseModel

from blctl.client.base_client import BaseServiceClient, require_text


class InvoiceListItem(BaseModel):
    invoice_uuid: Optional[str] = None
    invoice_period: Optional[str] = None
    amount: Optional[str] = None
    updated_at: Optional[str] = None


class InvoiceList(BaseModel):
    """ Every invoice of the account, plus the preview of the invoice for the current period """
    invoices: List[InvoiceListItem] = []
    invoice_preview: Optional[InvoiceListItem] = None


class InvoiceItem(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    product: Optional[str] = None
    group_description: Optional[str] = None
    resource_uuid: Optional[str] = None
    resource_id: Optional[str] = None
    duration: Optional[str] = None
    duration_unit: Optional[str] = None
    project_name: Optional[str] = None
    category: Optional[str] = None


class Invoice(BaseModel):
    invoice_items: List[InvoiceItem] = []


class InvoiceSummary(BaseModel):
    invoice_uuid: Optional[str] = None
    billing_period: Optional[str] = None
    amount: Optional[str] = None
    user_name: Optional[str] = None
    user_billing_address: Optional[dict] = None
    user_company: Optional[str] = None
    user_email: Optional[str] = None
    product_charges: Optional[dict] = None
    overages: Optional[dict] = None
    taxes: Optional[dict] = None
    credits_and_adjustments: Optional[dict] = None


class InvoicesClient(BaseServiceClient):
    base_path = 'v2/customers/my/invoices'

    def list(self) -> InvoiceList:
        """ List all invoices

            Every page of the listing carries the invoice preview. The one from the last page is kept.
        """
        collection = self._list(self.base_path,
                                'invoices',
                                InvoiceListItem,
                                auxiliary_key='invoice_preview',
                                auxiliary_type=InvoiceListItem)
        return InvoiceList(invoices=collection.items, invoice_preview=collection.auxiliary)

    def get(self, invoice_uuid: str) -> Invoice:
        """ Get every line item of the given invoice """
        collection = self._list(self.__path_of(invoice_uuid), 'invoice_items', InvoiceItem)
        return Invoice(invoice_items=collection.items)

    def get_summary(self, invoice_uuid: str) -> InvoiceSummary:
        return self._get_object(f'{self.__path_of(invoice_uuid)}/summary', None, InvoiceSummary)

    def get_pdf(self, invoice_uuid: str) -> bytes:
        return self._get_bytes(f'{self.__path_of(invoice_uuid)}/pdf')

    def get_csv(self, invoice_uuid: str) -> bytes:
        return self._get_bytes(f'{self.__path_of(invoice_uuid)}/csv')

    def __path_of(self, invoice_uuid: str) -> str:
        return f'{self.base_path}/{require_text("invoice_uuid", invoice_uuid)}'
