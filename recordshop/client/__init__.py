"""Staff client: session, API calls and the record list screen."""
from recordshop.client.api_client import RecordShopClient
from recordshop.client.inventory import InventoryView
from recordshop.client.session import Session, SessionStorage

__all__ = ["InventoryView", "RecordShopClient", "Session", "SessionStorage"]
