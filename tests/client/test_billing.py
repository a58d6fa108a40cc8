from blctl.client.account import AccountClient
from blctl.client.billing_history import BillingHistoryClient
from blctl.client.invoices import InvoicesClient, InvoiceList
from tests.mock_api import MockApiTestCase, paginated, respond


class TestInvoicesClient(MockApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.client = InvoicesClient.make(self.endpoint)

    def test_list_keeps_the_preview_of_the_last_page(self):
        self.api.on('GET', '/v2/customers/my/invoices', paginated(
            'invoices',
            [
                [{'invoice_uuid': 'inv-1', 'amount': '10.00'}, {'invoice_uuid': 'inv-2', 'amount': '12.00'}],
                [{'invoice_uuid': 'inv-3', 'amount': '8.00'}],
            ],
            extras=[
                {'invoice_preview': {'invoice_uuid': 'preview', 'amount': '1.00'}},
                {'invoice_preview': {'invoice_uuid': 'preview', 'amount': '2.00'}},
            ]
        ))

        invoice_list = self.client.list()

        self.assertIsInstance(invoice_list, InvoiceList)
        self.assertEqual(['inv-1', 'inv-2', 'inv-3'], [i.invoice_uuid for i in invoice_list.invoices])
        self.assertEqual('2.00', invoice_list.invoice_preview.amount)

    def test_list_without_preview(self):
        self.api.on('GET', '/v2/customers/my/invoices', paginated('invoices', [[{'invoice_uuid': 'inv-1'}]]))

        self.assertIsNone(self.client.list().invoice_preview)

    def test_get_collects_every_line_item(self):
        self.api.on('GET', '/v2/customers/my/invoices/inv-1', paginated('invoice_items', [
            [{'name': 'server-1', 'amount': '5.00'}],
            [{'name': 'server-2', 'amount': '5.00'}],
        ]))

        invoice = self.client.get('inv-1')

        self.assertEqual(['server-1', 'server-2'], [i.name for i in invoice.invoice_items])
        self.assertEqual(['1', '2'],
                         [r.query['page'] for r in self.api.requests_to('/v2/customers/my/invoices/inv-1')])

    def test_summary(self):
        self.api.on('GET', '/v2/customers/my/invoices/inv-1/summary',
                    respond(200, {'invoice_uuid': 'inv-1', 'billing_period': '2026-09', 'amount': '10.00'}))

        summary = self.client.get_summary('inv-1')

        self.assertEqual('2026-09', summary.billing_period)

    def test_downloads(self):
        self.api.on('GET', '/v2/customers/my/invoices/inv-1/pdf', respond(200, b'%PDF-1.4'))
        self.api.on('GET', '/v2/customers/my/invoices/inv-1/csv', respond(200, 'name,amount\nserver-1,5.00\n'))

        self.assertEqual(b'%PDF-1.4', self.client.get_pdf('inv-1'))
        self.assertEqual(b'name,amount\nserver-1,5.00\n', self.client.get_csv('inv-1'))

    def test_empty_uuid(self):
        with self.assertRaises(ValueError):
            self.client.get('')


class TestBillingHistoryClient(MockApiTestCase):
    def test_list(self):
        self.api.on('GET', '/v2/customers/my/billing_history', paginated('billing_history', [
            [{'description': 'Invoice 1', 'amount': '10.00', 'type': 'Invoice'}],
            [{'description': 'Payment', 'amount': '-10.00', 'type': 'Payment'}],
        ]))

        history = BillingHistoryClient.make(self.endpoint).list()

        self.assertEqual(['Invoice', 'Payment'], [e.type for e in history.billing_history])


class TestAccountClient(MockApiTestCase):
    def test_get(self):
        self.api.on('GET', '/v2/account', respond(200, {'account': {'email': 'user@example.com', 'server_limit': 25}}))

        account = AccountClient.make(self.endpoint).get()

        self.assertEqual('user@example.com', account.email)
        self.assertEqual(25, account.server_limit)

    def test_balance_is_not_enveloped(self):
        self.api.on('GET', '/v2/customers/my/balance', respond(200, {'account_balance': '-5.00',
                                                                     'month_to_date_usage': '3.20'}))

        balance = AccountClient.make(self.endpoint).get_balance()

        self.assertEqual('-5.00', balance.account_balance)
