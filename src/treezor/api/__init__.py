"""HTTP entry points for receiving upstream webhooks."""

from treezor.api.webhooks import create_webhook_router

__all__ = ["create_webhook_router"]
