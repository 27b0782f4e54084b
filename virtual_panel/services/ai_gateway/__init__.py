from .ai_gateway import AIGateway, get_ai_gateway

__all__ = [
    "AIGateway",
    "get_ai_gateway",
]
