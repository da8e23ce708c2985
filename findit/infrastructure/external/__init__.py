"""External service clients for the vendor vision and language-model APIs"""

from .chat_completion_client import ChatCompletionClient
from .google_vision_client import GoogleVisionClient

__all__ = [
    "ChatCompletionClient",
    "GoogleVisionClient",
]
