import logging
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class ExternalPublisher(Protocol):
    async def publish(self, post) -> Optional[str]:
        """Push a published post to an external storefront.

        Returns the external article id, or None when nothing was created.
        """
        ...


class ShopifyPublisher:
    """Storefront hook for published posts. Not wired to Shopify yet."""

    async def publish(self, post) -> Optional[str]:
        # TODO: create the article through the Shopify Admin API and return its id
        logger.info(f"Shopify publishing not configured, skipping post {post.id}")
        return None
