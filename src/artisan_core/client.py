from __future__ import annotations

import json
from typing import Any, Mapping

import httpx
from loguru import logger

from artisan_core.config import settings
from artisan_core.errors import TransportError
from artisan_core.logging_utils import log_event

JSON_HEADERS = {"Content-Type": "application/json"}
_ERROR_BODY_LIMIT = 200


def _messages_from_json_list(items: list[Any]) -> str:
    return "; ".join(str(item.get("message", item)) if isinstance(item, dict) else str(item) for item in items)


def _messages_from_stringified(message: str) -> str:
    # Validation errors sometimes arrive as a JSON array serialized into `message`.
    try:
        inner = json.loads(message)
    except (ValueError, RecursionError):
        return message
    if isinstance(inner, list) and inner and isinstance(inner[0], dict) and inner[0].get("message"):
        parts = []
        for item in inner:
            path = ".".join(str(p) for p in item.get("path", []))
            parts.append(f"{path}: {item.get('message')}" if path else str(item.get("message")))
        return "; ".join(parts)
    return message


def _extract_error_payload(response: httpx.Response) -> tuple[str, Any]:
    try:
        payload = response.json()
    except (ValueError, RecursionError):
        payload = response.text

    reason = response.reason_phrase or "Server Error"
    error = payload.get("error") if isinstance(payload, dict) else None

    if isinstance(error, dict) and isinstance(error.get("json"), list):
        detail = _messages_from_json_list(error["json"])
    elif isinstance(error, dict) and isinstance(error.get("message"), str) and error["message"].startswith("["):
        detail = _messages_from_stringified(error["message"])
    elif isinstance(error, dict) and error.get("message"):
        detail = str(error["message"])
    elif isinstance(payload, str) and payload:
        detail = payload[:_ERROR_BODY_LIMIT]
    else:
        detail = "Could not parse error details."

    return f"{reason}. {detail}", payload


def _decode_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (ValueError, RecursionError):
        # Left for the resolver to classify.
        logger.warning(log_event("artisan.transport.non_json_body", status=response.status_code, chars=len(response.text)))
        return response.text


def _raise_for_status(response: httpx.Response) -> None:
    if response.status_code >= 400:
        message, payload = _extract_error_payload(response)
        logger.error(log_event("artisan.transport.http_error", status=response.status_code, message=message))
        raise TransportError(status_code=response.status_code, message=message, payload=payload)


async def post_rpc(
    body: Mapping[str, Any],
    *,
    endpoint: str | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    url = endpoint or settings.ARTISAN_API_ENDPOINT

    try:
        async with httpx.AsyncClient(timeout=timeout or settings.ARTISAN_REQUEST_TIMEOUT, transport=transport) as client:
            response = await client.post(url, json=dict(body), headers=JSON_HEADERS)
    except httpx.RequestError as exc:
        logger.error(log_event("artisan.transport.network_error", url=url, error=f"{type(exc).__name__}: {exc}"))
        raise TransportError(status_code=0, message=str(exc), payload={"error": str(exc)}) from exc

    _raise_for_status(response)
    return _decode_body(response)


def post_rpc_sync(
    body: Mapping[str, Any],
    *,
    endpoint: str | None = None,
    timeout: float | None = None,
    transport: httpx.BaseTransport | None = None,
) -> Any:
    url = endpoint or settings.ARTISAN_API_ENDPOINT

    try:
        with httpx.Client(timeout=timeout or settings.ARTISAN_REQUEST_TIMEOUT, transport=transport) as client:
            response = client.post(url, json=dict(body), headers=JSON_HEADERS)
    except httpx.RequestError as exc:
        logger.error(log_event("artisan.transport.network_error", url=url, error=f"{type(exc).__name__}: {exc}"))
        raise TransportError(status_code=0, message=str(exc), payload={"error": str(exc)}) from exc

    _raise_for_status(response)
    return _decode_body(response)


def format_transport_error(exc: Exception) -> dict[str, Any]:
    if isinstance(exc, TransportError):
        return {
            "error": exc.message,
            "status_code": exc.status_code,
            "details": exc.payload,
        }
    return {"error": str(exc)}
