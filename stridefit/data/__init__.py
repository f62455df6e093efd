from stridefit.data.inventory import INVENTORY, get_shoe, list_brands
from stridefit.data.community import EVENTS, TRAILS, get_event, get_trail

__all__ = ["INVENTORY", "get_shoe", "list_brands", "EVENTS", "TRAILS", "get_event", "get_trail"]
