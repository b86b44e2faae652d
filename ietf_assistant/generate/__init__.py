# Generator package

# Prompt builder, completion proxy and the upstream client.

from .prompts import build_system_prompt, AUDIENCES
from .proxy import CompletionProxy
from .types import ChatRequest, CompletionResult, ErrorKind, Message, ModelParams

__all__ = [
    "build_system_prompt",
    "AUDIENCES",
    "CompletionProxy",
    "ChatRequest",
    "CompletionResult",
    "ErrorKind",
    "Message",
    "ModelParams",
]
