"""
Inventory Insights

Read-only question answering over the current snapshot through the
model-inference service. Nothing here mutates or persists inventory.
"""

import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from core.config import ModelConfig
from core.service_client_base import BaseServiceClient
from .models import EntryStatus, InventoryData

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "API key is missing. Set ISA_MODEL_API_KEY to enable inventory insights."
EMPTY_ANSWER_MESSAGE = "I couldn't generate an insight at this time."
FAILURE_MESSAGE = "Sorry, I encountered an error while analyzing your inventory."


def summarize_inventory(data: InventoryData) -> List[Dict[str, Any]]:
    """Per-variant slot counts for every product"""
    return [
        {
            "name": product.name,
            "variants": [
                {
                    "color": variant.name,
                    "totalSlots": len(variant.entries),
                    "stocked": variant.count(EntryStatus.STOCKED),
                    "sold": variant.count(EntryStatus.SOLD),
                    "empty": variant.count(EntryStatus.EMPTY),
                }
                for variant in product.variants
            ],
        }
        for product in data.products
    ]


def build_insight_prompt(data: InventoryData, query: str) -> str:
    summary = json.dumps(summarize_inventory(data), indent=2)
    return (
        "Context: You are an intelligent inventory assistant for a retail app.\n"
        "Here is the current inventory data in JSON format:\n"
        f"{summary}\n\n"
        f"User Query: {query}\n\n"
        "Instructions:\n"
        "- Analyze the data to answer the user's question.\n"
        "- Keep answers concise, professional, and helpful.\n"
        "- If suggesting actions (like restocking), be specific about which color/product.\n"
        "- Do not output Markdown formatting for the whole response, just plain text or simple lists.\n"
    )


def _extract_text(payload: Any) -> Optional[str]:
    if not isinstance(payload, dict):
        return None
    result = payload.get("result")
    if isinstance(result, str):
        return result
    if isinstance(result, dict):
        return result.get("content") or result.get("text")
    return payload.get("text")


class InsightClient(BaseServiceClient):
    """Model service client for inventory questions"""

    service_name = "model_service"

    def __init__(self, config: Optional[ModelConfig] = None, client: Optional[httpx.AsyncClient] = None):
        self.config = config or ModelConfig.from_env()
        super().__init__(base_url=self.config.service_url, timeout=self.config.timeout, client=client)

    async def summarize(self, data: InventoryData, query: str) -> str:
        """
        Answer a free-form question about the inventory

        Args:
            data: Current snapshot (read only)
            query: User question

        Returns:
            Answer text, or an explanatory message when the service is
            not configured or fails
        """
        if not self.config.configured:
            return MISSING_KEY_MESSAGE

        request_data = {
            "model": self.config.default_llm,
            "task": "chat",
            "service_type": "text",
            "input_data": [{"role": "user", "content": build_insight_prompt(data, query)}],
            "parameters": {"temperature": self.config.temperature},
        }

        try:
            response = await self.post(
                "/api/v1/invoke",
                json=request_data,
                headers={"Authorization": f"Bearer {self.config.api_key}"}
            )
            response.raise_for_status()
            payload = response.json()
        except Exception as e:
            logger.error(f"Insight request failed: {e}")
            return FAILURE_MESSAGE

        if isinstance(payload, dict) and payload.get("success") is False:
            logger.error(f"Insight request rejected: {payload.get('error')}")
            return FAILURE_MESSAGE

        return _extract_text(payload) or EMPTY_ANSWER_MESSAGE


__all__ = [
    "InsightClient",
    "summarize_inventory",
    "build_insight_prompt",
]
