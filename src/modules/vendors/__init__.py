from .base import AIVendor, VendorType
from .factory import VENDOR_REGISTRY, create_vendor, resolve_vendor_type
from .gateway import VendorGateway

__all__ = [
    "AIVendor",
    "VendorType",
    "VENDOR_REGISTRY",
    "create_vendor",
    "resolve_vendor_type",
    "VendorGateway",
]
