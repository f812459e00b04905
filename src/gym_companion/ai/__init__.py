"""AI gateway access: prompts, client and reply parsing."""

from .client import GatewayClient
from .parsing import parse_json_reply, strip_code_fences

__all__ = [
    "GatewayClient",
    "parse_json_reply",
    "strip_code_fences",
]
