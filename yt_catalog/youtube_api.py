"""Wrappers assíncronos para endpoints da YouTube Data API v3."""

import logging
from typing import Any, Dict, List, Optional

import aiohttp

from .config import YOUTUBE_API_URL, BATCH_SIZE_IDS, Settings
from .http_client import http_get_json

logger = logging.getLogger(__name__)


def uploads_playlist_id(channel_id: str) -> str:
    """Playlist "uploads" do canal: troca o prefixo `UC` por `UU`."""
    return "UU" + channel_id[2:]


async def playlist_items_video_ids(
    session: aiohttp.ClientSession,
    settings: Settings,
) -> List[str]:
    """Lista todos os IDs de vídeos da playlist de uploads via `playlistItems.list`.

    Custa 1 unidade por página (o `search.list` custa 100). Qualquer página com
    `error` aborta a listagem inteira.
    """
    url = f"{YOUTUBE_API_URL}/playlistItems"
    playlist_id = uploads_playlist_id(settings.channel_id)
    video_ids: List[str] = []
    page_token: Optional[str] = None
    page = 0

    logger.info("Buscando IDs de vídeos da playlist %s...", playlist_id)
    while True:
        params: Dict[str, Any] = {
            "part": "snippet",
            "playlistId": playlist_id,
            "maxResults": settings.page_size,
            "key": settings.api_key,
        }
        if page_token:
            params["pageToken"] = page_token

        data = await http_get_json(session, url, params)
        page += 1
        new_ids: List[str] = []
        for it in data.get("items", []):
            vid = it.get("snippet", {}).get("resourceId", {}).get("videoId")
            if vid:
                new_ids.append(vid)
        video_ids.extend(new_ids)
        logger.debug("Página %d: %d IDs (total %d)", page, len(new_ids), len(video_ids))

        page_token = data.get("nextPageToken")
        if not page_token:
            break

    logger.info("%d IDs de vídeos encontrados.", len(video_ids))
    return video_ids


async def videos_list_details(
    session: aiohttp.ClientSession,
    settings: Settings,
    video_ids: List[str],
    *,
    parts: str = "contentDetails,snippet",
) -> List[Dict[str, Any]]:
    """Busca detalhes de vídeos em lotes sequenciais via endpoint `videos.list`."""
    if not video_ids:
        return []

    url = f"{YOUTUBE_API_URL}/videos"
    out: List[Dict[str, Any]] = []
    logger.info("Buscando detalhes de %d vídeos em lotes...", len(video_ids))
    for i in range(0, len(video_ids), BATCH_SIZE_IDS):
        chunk = video_ids[i : i + BATCH_SIZE_IDS]
        params = {"id": ",".join(chunk), "part": parts, "key": settings.api_key}
        data = await http_get_json(session, url, params)
        items = data.get("items")
        if not items:
            logger.warning("Lote %d-%d sem `items`; ignorado", i, i + len(chunk) - 1)
            continue
        out.extend(items)

    # auditoria: não retornados
    returned = {it.get("id") for it in out}
    missing = [vid for vid in video_ids if vid not in returned]
    if missing:
        logger.warning("%d vídeo(s) sem detalhes: %s", len(missing), ", ".join(missing))

    logger.info("Detalhes obtidos para %d vídeos.", len(out))
    return out
