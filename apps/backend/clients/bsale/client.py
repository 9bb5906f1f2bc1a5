from apps.backend.clients.bsale.base import BsaleBaseClient
from apps.backend.clients.bsale.clients import ClientsClient
from apps.backend.clients.bsale.config import BsaleCredentials
from apps.backend.clients.bsale.documents import DocumentsClient
from apps.backend.clients.bsale.payments import PaymentsClient
from apps.backend.clients.bsale.price_lists import PriceListsClient
from apps.backend.clients.bsale.products import ProductsClient, ProductTypesClient
from apps.backend.clients.bsale.stocks import StockConsumptionsClient, StockReceptionsClient, StocksClient
from apps.backend.clients.bsale.utility import (
    CurrenciesClient,
    DiscountsClient,
    DocumentTypesClient,
    DynamicAttributesClient,
    OfficesClient,
    PaymentMethodsClient,
    SaleConditionsClient,
    ShipmentTypesClient,
    TaxesClient,
    UsersClient,
)
from apps.backend.clients.bsale.variants import VariantsClient
from apps.backend.clients.bsale.webhooks import WebhooksClient


class BsaleClient:
    """
    Entry point to the whole Bsale API.

    Every resource attribute wraps the same BsaleBaseClient, so a single
    update_credentials() call is seen by all of them at once.

    Usage:
        async with build_bsale_client(config) as bsale:
            page = await bsale.products.list({"limit": 50})
    """

    def __init__(self, base: BsaleBaseClient):
        self._base = base

        self.products = ProductsClient(base)
        self.product_types = ProductTypesClient(base)
        self.variants = VariantsClient(base)

        self.stocks = StocksClient(base)
        self.stock_receptions = StockReceptionsClient(base)
        self.stock_consumptions = StockConsumptionsClient(base)

        self.price_lists = PriceListsClient(base)

        self.documents = DocumentsClient(base)
        self.clients = ClientsClient(base)
        self.payments = PaymentsClient(base)

        self.webhooks = WebhooksClient(base)

        self.offices = OfficesClient(base)
        self.users = UsersClient(base)
        self.currencies = CurrenciesClient(base)
        self.document_types = DocumentTypesClient(base)
        self.payment_methods = PaymentMethodsClient(base)
        self.sale_conditions = SaleConditionsClient(base)
        self.discounts = DiscountsClient(base)
        self.taxes = TaxesClient(base)
        self.shipment_types = ShipmentTypesClient(base)
        self.dynamic_attributes = DynamicAttributesClient(base)

    def update_credentials(self, credentials: BsaleCredentials) -> None:
        self._base.update_credentials(credentials)

    def get_credentials(self) -> BsaleCredentials:
        return self._base.get_credentials()

    async def aclose(self) -> None:
        await self.webhooks.aclose()
        await self._base.aclose()

    async def __aenter__(self) -> "BsaleClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
