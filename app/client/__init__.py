from app.client.admin_view import AdminView
from app.client.api import CatalogApiClient
from app.client.cart import Cart
from app.client.cart_view import CartView
from app.client.catalog_view import CatalogView
from app.client.storage import MemorySessionStorage, SessionStorage


class BookstoreClient:
    """
    Root of the client: owns the API binding and the one cart of the session,
    and hands both to every screen it builds.
    """

    def __init__(
        self,
        api: CatalogApiClient | None = None,
        storage: SessionStorage | None = None,
    ):
        self.api = api or CatalogApiClient()
        self.storage = storage or MemorySessionStorage()
        self.cart = Cart(self.storage)

    def catalog_view(self) -> CatalogView:
        return CatalogView(self.api, self.cart)

    def cart_view(self) -> CartView:
        return CartView(self.cart)

    def admin_view(self) -> AdminView:
        return AdminView(self.api)
