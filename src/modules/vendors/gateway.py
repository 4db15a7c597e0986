"""Single entry point for asking any configured AI vendor."""

import time

from src.core.config import VendorConfig
from src.core.exceptions import ConfigurationError
from src.utils.logger import get_logger

from .base import VendorType
from .factory import create_vendor, resolve_vendor_type

logger = get_logger(__name__)


class VendorGateway:
    """Resolves credentials from explicit config and dispatches to an adapter."""

    def __init__(self, config: VendorConfig):
        self.config = config

    def configured_vendors(self) -> list[str]:
        return [v.value for v in VendorType if self.config.api_key_for(v.value)]

    def resolve_vendor(self, vendor: VendorType | str | None = None) -> VendorType:
        """Requested vendor, or the configured default when none was asked for."""
        return resolve_vendor_type(vendor or self.config.default_vendor)

    async def ask(
        self,
        prompt: str,
        vendor: VendorType | str | None = None,
        model: str | None = None,
    ) -> str:
        vendor_type = self.resolve_vendor(vendor)
        api_key = self.config.api_key_for(vendor_type.value)
        if not api_key:
            raise ConfigurationError(
                f"{vendor_type.value.upper()} API key not configured"
            )

        adapter = create_vendor(vendor_type, self.config)
        start_time = time.perf_counter()
        text = await adapter.ask(prompt, api_key, model)
        logger.info(
            "Vendor call completed",
            vendor=vendor_type.value,
            model=model or adapter.default_model,
            duration_ms=int((time.perf_counter() - start_time) * 1000),
            reply_chars=len(text),
        )
        return text
