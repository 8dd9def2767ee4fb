"""Base endpoint with the shared JSON-over-HTTP exchange."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

import httpx

from embedclient.api.errors import ApiError

if TYPE_CHECKING:
    from embedclient.client import ApiClient

logger = logging.getLogger(__name__)


class BaseEndpoint:
    root: str = ""

    def __init__(self, api: "ApiClient") -> None:
        self._api = api

    @property
    def enable_debug(self) -> bool:
        return self._api.settings.debug

    def get_url(self, suffix: str = "") -> str:
        return f"/{self.root}{suffix}"

    async def _post_json(
        self,
        url: str,
        body: dict[str, Any],
        *,
        cancel: asyncio.Event | None = None,
    ) -> tuple[Any, httpx.Response]:
        """POST ``body`` as JSON and return the decoded payload with the raw response.

        Non-2xx statuses raise :class:`ApiError`. Transport errors, JSON decode
        errors and cancellation propagate unchanged.
        """
        content = json.dumps(body, ensure_ascii=False)
        if self.enable_debug:
            logger.debug("POST %s request: %s", url, content)

        send = self._api.http.post(
            url,
            content=content.encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )
        response = await _await_cancellable(send, cancel)
        text = response.text
        if self.enable_debug:
            logger.debug("POST %s response %s: %s", url, response.status_code, text)

        if response.status_code < 200 or response.status_code >= 300:
            raise ApiError(
                status_code=response.status_code,
                response_text=text,
                request_id=response.headers.get("x-request-id"),
                request={"url": str(response.request.url), "body": body},
            )
        return json.loads(text), response


async def _await_cancellable(awaitable: Any, cancel: asyncio.Event | None) -> Any:
    if cancel is None:
        return await awaitable
    if cancel.is_set():
        awaitable.close()
        raise asyncio.CancelledError("Request cancelled before it was sent.")

    request_task = asyncio.ensure_future(awaitable)
    cancel_task = asyncio.ensure_future(cancel.wait())
    try:
        done, _pending = await asyncio.wait(
            {request_task, cancel_task},
            return_when=asyncio.FIRST_COMPLETED,
        )
    except asyncio.CancelledError:
        request_task.cancel()
        cancel_task.cancel()
        # Let the in-flight request unwind before the caller can close the client.
        await asyncio.gather(request_task, cancel_task, return_exceptions=True)
        raise

    if request_task in done:
        cancel_task.cancel()
        await asyncio.gather(cancel_task, return_exceptions=True)
        return request_task.result()

    request_task.cancel()
    try:
        await request_task
    except asyncio.CancelledError:
        pass
    except Exception:
        logger.debug("In-flight request failed while being cancelled.", exc_info=True)
    raise asyncio.CancelledError("Request cancelled while awaiting the response.")
