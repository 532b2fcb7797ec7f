from __future__ import annotations

import asyncio
import logging

import httpx

from inventory_tracker.core.config import Settings
from inventory_tracker.domain.models import EventKind, InventoryEvent, format_amount

logger = logging.getLogger(__name__)

_TITLES = {
    EventKind.CREATED: "Product added",
    EventKind.UPDATED: "Product updated",
    EventKind.DELETED: "Product removed",
}


class NotificationService:
    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        self._http_client = http_client
        self._settings = settings
        self._tasks: set[asyncio.Task[None]] = set()

    def handle_event(self, event: InventoryEvent) -> None:
        """Inventory store listener: turns a change event into a webhook notification."""
        if not self._settings.webhook_enabled or not self._settings.webhook_url:
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, skipping notification for %s", event.kind)
            return

        product = event.product
        price = format_amount(product.price)
        message = f"{product.name} (#{product.id}): {product.quantity} x {price}"
        self._schedule(loop, _TITLES[event.kind], message)

    async def aclose(self) -> None:
        """Waits for webhook calls still in flight; call before closing the HTTP client."""
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    def _schedule(self, loop: asyncio.AbstractEventLoop, title: str, message: str) -> None:
        task = loop.create_task(self._perform_send(title, message))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _perform_send(self, title: str, message: str) -> None:
        """Internal method to perform the actual HTTP call."""
        url = self._settings.webhook_url
        if not url:
            return

        try:
            if "ntfy.sh" in url:
                # ntfy style: POST {url} with text body and Title header
                await self._http_client.post(
                    url,
                    content=message,
                    headers={"Title": title},
                    timeout=10.0,
                )
            else:
                # Gotify style (fallback): POST {url}/message with JSON body
                base_url = url.rstrip("/")
                await self._http_client.post(
                    f"{base_url}/message",
                    json={
                        "title": title,
                        "message": message,
                        "priority": 5,
                    },
                    timeout=10.0,
                )
        except Exception:
            logger.exception("Failed to send notification to %s", url)
