from pydantic import BaseModel

from src.api.tools.schemas import ToolRequest
from src.modules.vendors.gateway import VendorGateway
from src.utils.logger import get_logger

from .definitions import get_tool_definition
from .output_parser import parse_tool_result

logger = get_logger(__name__)


class ToolService:
    """Runs one AI text tool: prompt, vendor call, then structured parse."""

    def __init__(self, gateway: VendorGateway):
        self.gateway = gateway

    async def run(self, tool_name: str, request: ToolRequest) -> BaseModel:
        definition = get_tool_definition(tool_name)
        prompt = definition.build_prompt(request)

        vendor = self.gateway.resolve_vendor(request.vendor)
        reply = await self.gateway.ask(prompt, vendor=vendor, model=request.model)
        result = parse_tool_result(reply, definition.result_model)

        logger.info(
            "Tool completed",
            tool_name=tool_name,
            vendor=vendor.value,
            prompt_chars=len(prompt),
        )
        return result
