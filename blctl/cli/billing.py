from typing import Optional

import click
from imagination import container

from blctl.cli.helpers.client_factory import ConfigurationBasedClientFactory
from blctl.cli.helpers.command.decorator import command
from blctl.cli.helpers.command.group import AliasedGroup
from blctl.cli.helpers.command.spec import RESOURCE_OUTPUT_SPEC
from blctl.cli.helpers.iterator_printer import show_iterator, show_object
from blctl.cli.helpers.printer import echo_result
from blctl.client.billing_history import BillingHistoryClient
from blctl.client.invoices import InvoicesClient


def _get(context: Optional[str] = None,
         access_token: Optional[str] = None,
         api_url: Optional[str] = None) -> InvoicesClient:
    factory: ConfigurationBasedClientFactory = container.get(ConfigurationBasedClientFactory)
    return factory.get(InvoicesClient, context_name=context, access_token=access_token, api_url=api_url)


def _write(file_path: str, content: bytes):
    with open(file_path, 'wb') as f:
        f.write(content)
    echo_result('Invoice', 'green', 'saved', f'{file_path} ({len(content)} bytes)')


@click.group('invoice', cls=AliasedGroup, aliases=['invoices'])
def invoice_command_group():
    """ Show invoices """


@command(invoice_command_group, 'list', specs=[RESOURCE_OUTPUT_SPEC], aliases=['ls'])
def list_invoices(context: Optional[str] = None,
                  access_token: Optional[str] = None,
                  api_url: Optional[str] = None,
                  output: Optional[str] = None):
    """ List all invoices, along with the preview of the invoice for the current period """
    show_object(output, _get(context, access_token, api_url).list())


@command(invoice_command_group, 'get', specs=[RESOURCE_OUTPUT_SPEC])
def get_invoice(invoice_uuid: str,
                context: Optional[str] = None,
                access_token: Optional[str] = None,
                api_url: Optional[str] = None,
                output: Optional[str] = None):
    """ List the line items of the given invoice """
    show_iterator(output, _get(context, access_token, api_url).get(invoice_uuid).invoice_items)


@command(invoice_command_group, 'summary', specs=[RESOURCE_OUTPUT_SPEC])
def get_invoice_summary(invoice_uuid: str,
                        context: Optional[str] = None,
                        access_token: Optional[str] = None,
                        api_url: Optional[str] = None,
                        output: Optional[str] = None):
    """ Get the summary of the given invoice """
    show_object(output, _get(context, access_token, api_url).get_summary(invoice_uuid))


@command(invoice_command_group, 'pdf')
def download_invoice_pdf(invoice_uuid: str,
                         file_path: str,
                         context: Optional[str] = None,
                         access_token: Optional[str] = None,
                         api_url: Optional[str] = None):
    """ Download the given invoice as a PDF file """
    _write(file_path, _get(context, access_token, api_url).get_pdf(invoice_uuid))


@command(invoice_command_group, 'csv')
def download_invoice_csv(invoice_uuid: str,
                         file_path: str,
                         context: Optional[str] = None,
                         access_token: Optional[str] = None,
                         api_url: Optional[str] = None):
    """ Download the given invoice as a CSV file """
    _write(file_path, _get(context, access_token, api_url).get_csv(invoice_uuid))


@click.group('billing-history', cls=AliasedGroup, aliases=['bh'])
def billing_history_command_group():
    """ Show the billing history """


@command(billing_history_command_group, 'list', specs=[RESOURCE_OUTPUT_SPEC], aliases=['ls'])
def list_billing_history(context: Optional[str] = None,
                         access_token: Optional[str] = None,
                         api_url: Optional[str] = None,
                         output: Optional[str] = None):
    """ List every billing history entry """
    factory: ConfigurationBasedClientFactory = container.get(ConfigurationBasedClientFactory)
    client = factory.get(BillingHistoryClient, context_name=context, access_token=access_token, api_url=api_url)
    show_iterator(output, client.list().billing_history)
