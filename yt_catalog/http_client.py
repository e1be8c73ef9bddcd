# -*- coding: utf-8 -*-
from typing import Any, Dict

import aiohttp

from .errors import RemoteError


def _error_message(data: Any) -> str:
    if not isinstance(data, dict) or "error" not in data:
        return ""
    err = data["error"]
    if isinstance(err, dict):
        return err.get("message") or str(err)
    return str(err) if err is not None else "null"


async def http_get_json(session: aiohttp.ClientSession, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
    """GET único (sem retry); objeto `error` no corpo ou status >= 400 vira RemoteError."""
    try:
        async with session.get(url, params=params) as r:
            try:
                data = await r.json(content_type=None)
            except ValueError:
                data = None
            message = _error_message(data)
            if message:
                raise RemoteError(f"YouTube API Error: {message}")
            if r.status >= 400:
                raise RemoteError(f"YouTube API Error: HTTP {r.status} {r.reason or ''}".rstrip())
            if not isinstance(data, dict):
                raise RemoteError(f"Resposta inesperada de {url}: corpo não é um objeto JSON")
            return data
    except aiohttp.ClientError as e:
        raise RemoteError(f"Falha na requisição a {url}: {e}") from e
