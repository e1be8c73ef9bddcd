# -*- coding: utf-8 -*-
from __future__ import annotations

import asyncio
import enum
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import aiohttp

from .config import TIMEOUT_SECS, Settings
from .errors import CatalogError, ConfigError, RemoteError
from .io_json import write_json_array
from .transform import filter_long_videos
from .utils import dedupe_preserving_order
from .youtube_api import playlist_items_video_ids, videos_list_details

logger = logging.getLogger(__name__)


class Stage(enum.Enum):
    INIT = "init"
    VALIDATING_CONFIG = "validating_config"
    LISTING_IDS = "listing_ids"
    FETCHING_DETAILS = "fetching_details"
    FILTERING = "filtering"
    PERSISTING = "persisting"
    DONE = "done"
    ABORTED = "aborted"


@dataclass
class RunOutcome:
    """Resultado de uma execução: onde parou, por quê e o que foi gravado."""

    stage: Stage
    error: Optional[CatalogError] = None
    failed_stage: Optional[Stage] = None
    written: bool = False
    video_count: int = 0
    output_file: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.stage is Stage.DONE

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


def _aborted(stage: Stage, error: CatalogError) -> RunOutcome:
    logger.error("Falha ao buscar vídeos do YouTube (%s): %s", stage.value, error)
    return RunOutcome(Stage.ABORTED, error=error, failed_stage=stage)


async def _collect(session: aiohttp.ClientSession, settings: Settings) -> RunOutcome:
    stage = Stage.LISTING_IDS
    try:
        video_ids = await playlist_items_video_ids(session, settings)
        if not video_ids:
            logger.info("Nenhum vídeo encontrado.")
            return RunOutcome(Stage.DONE)

        unique_ids = dedupe_preserving_order(video_ids)
        if len(unique_ids) != len(video_ids):
            # a playlist pode mudar entre páginas se houver upload durante a listagem
            logger.warning("%d ID(s) duplicado(s) descartado(s)", len(video_ids) - len(unique_ids))

        stage = Stage.FETCHING_DETAILS
        details: List[Dict[str, Any]] = await videos_list_details(session, settings, unique_ids)

        stage = Stage.FILTERING
        videos = filter_long_videos(details, settings.min_duration_secs)

        stage = Stage.PERSISTING
        write_json_array(settings.output_file, videos)
    except aiohttp.ClientError as e:
        return _aborted(stage, RemoteError(str(e)))
    except CatalogError as e:
        return _aborted(stage, e)

    logger.info("%d vídeos gravados em %s", len(videos), settings.output_file)
    return RunOutcome(Stage.DONE, written=True, video_count=len(videos),
                      output_file=settings.output_file)


async def run(settings: Settings, session: Optional[aiohttp.ClientSession] = None) -> RunOutcome:
    """
    Fluxo: playlistItems.list → videos.list → filtro (>= 3 min) → grava JSON.

    Erros não são propagados: voltam dentro do RunOutcome (stage=ABORTED).
    """
    missing = settings.missing()
    if missing:
        return _aborted(Stage.VALIDATING_CONFIG, ConfigError(
            f"Defina {' e '.join(missing)} nas variáveis de ambiente."))

    if session is not None:
        return await _collect(session, settings)

    timeout = aiohttp.ClientTimeout(total=None, connect=TIMEOUT_SECS)
    async with aiohttp.ClientSession(timeout=timeout) as own_session:
        return await _collect(own_session, settings)


def run_sync(settings: Settings) -> RunOutcome:
    return asyncio.run(run(settings))
