from .base import Base
from .vendor import Vendor
from .product import Product
from .rating import Rating
from .vendor_session import VendorSession
