#!/usr/bin/env python3
"""Model configuration for inventory insights

Settings for the model-inference service that answers free-form
questions about the current inventory.
"""
import os
from dataclasses import dataclass

def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


@dataclass
class ModelConfig:
    """LLM settings for the insight assistant"""

    # ===========================================
    # Model Service Connection
    # ===========================================
    service_url: str = "http://localhost:8082"
    api_key: str = ""
    timeout: float = 30.0

    # ===========================================
    # LLM Configuration
    # ===========================================
    default_llm: str = "gpt-4.1-nano"
    temperature: float = 0.0

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls) -> 'ModelConfig':
        """Load model configuration from environment variables"""
        return cls(
            service_url=os.getenv("ISA_MODEL_URL") or os.getenv("MODEL_SERVICE_URL", "http://localhost:8082"),
            api_key=os.getenv("ISA_MODEL_API_KEY") or os.getenv("API_KEY", ""),
            timeout=_float(os.getenv("MODEL_TIMEOUT", "30.0"), 30.0),
            default_llm=os.getenv("DEFAULT_LLM", "gpt-4.1-nano"),
            temperature=_float(os.getenv("LLM_TEMPERATURE", "0.0"), 0.0),
        )
