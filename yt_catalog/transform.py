"""Conversão de duração ISO 8601 e filtro de vídeos longos."""

import logging
import re
from typing import Any, Dict, Iterable, List, Optional

from .config import MIN_DURATION_SECS

logger = logging.getLogger(__name__)

_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


def parse_duration_seconds(duration: Optional[str]) -> int:
    """Converte `PT1H5M3S` em segundos. Formato inválido retorna 0."""
    if not isinstance(duration, str):
        return 0
    match = _DURATION_RE.search(duration)
    if not match:
        return 0
    hours, minutes, seconds = (int(v) if v else 0 for v in match.groups())
    return hours * 3600 + minutes * 60 + seconds


def to_output_record(item: Dict[str, Any]) -> Dict[str, str]:
    """Mantém só o que o site usa. Levanta KeyError/TypeError se faltar campo."""
    snippet = item["snippet"]
    return {
        "id": item["id"],
        "title": snippet["title"],
        "thumbnail": snippet["thumbnails"]["medium"]["url"],
    }


def filter_long_videos(
    details: Iterable[Dict[str, Any]],
    min_duration_secs: int = MIN_DURATION_SECS,
) -> List[Dict[str, str]]:
    """Descarta vídeos com menos de `min_duration_secs` e projeta o restante."""
    out: List[Dict[str, str]] = []
    for item in details:
        duration = (item.get("contentDetails") or {}).get("duration")
        if parse_duration_seconds(duration) < min_duration_secs:
            continue
        try:
            out.append(to_output_record(item))
        except (KeyError, TypeError) as e:
            logger.warning("Vídeo %s ignorado: campo ausente %s", item.get("id"), e)
    return out
