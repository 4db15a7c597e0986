"""Vendor selection by tag."""

from src.core.config import VendorConfig
from src.core.exceptions import ConfigurationError

from .base import AIVendor, VendorType
from .gemini import GeminiVendor
from .openai import OpenAIVendor

# Every VendorType member must have an entry; tests enforce this.
VENDOR_REGISTRY: dict[VendorType, type[AIVendor]] = {
    VendorType.GEMINI: GeminiVendor,
    VendorType.OPENAI: OpenAIVendor,
}


def resolve_vendor_type(tag: VendorType | str) -> VendorType:
    """Map a runtime tag onto the closed set of vendors."""
    if isinstance(tag, VendorType):
        return tag
    try:
        return VendorType(str(tag).strip().lower())
    except ValueError:
        raise ConfigurationError(f"Unsupported AI vendor type: {tag}") from None


def create_vendor(
    tag: VendorType | str, config: VendorConfig | None = None
) -> AIVendor:
    """Build the adapter for ``tag``; unknown tags fail before any network call."""
    vendor_type = resolve_vendor_type(tag)
    vendor_cls = VENDOR_REGISTRY.get(vendor_type)
    if vendor_cls is None:
        raise ConfigurationError(f"AI vendor {vendor_type.value} is not registered")

    if config is None:
        return vendor_cls()

    api_url = {
        VendorType.GEMINI: config.gemini_api_url,
        VendorType.OPENAI: config.openai_api_url,
    }.get(vendor_type)
    return vendor_cls(api_url=api_url, timeout_seconds=config.timeout_seconds)
