"""Domain errors raised below the HTTP layer.

Route handlers never catch these; they are translated to responses by the
handlers in ``src.api.core.exceptions.base``.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.modules.credits.meter import AuthorizationResult


class ToolkitError(Exception):
    """Base class for domain errors."""


class ConfigurationError(ToolkitError):
    """A required setting is missing or a vendor tag is not recognised."""


class VendorError(ToolkitError):
    """An AI vendor call failed: rejected credential, network error or non-2xx."""

    def __init__(self, vendor: str, message: str, status_code: int | None = None):
        self.vendor = vendor
        self.status_code = status_code
        super().__init__(f"{vendor}: {message}")


class ParseError(ToolkitError):
    """Vendor reply had no usable JSON block or did not match the result schema."""


class InsufficientCreditsError(ToolkitError):
    """A metered call was denied by the credit meter."""

    def __init__(self, result: "AuthorizationResult"):
        self.result = result
        super().__init__(result.reason)
