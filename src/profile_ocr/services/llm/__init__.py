from .llm_service import VisionLLMService

__all__ = ["VisionLLMService"]
