"""Host integration: the lifecycle hook a site tool calls in dev mode."""

from .ContentSyncIntegration import ContentSyncIntegration, create_content_sync_integration

__all__ = ["ContentSyncIntegration", "create_content_sync_integration"]
