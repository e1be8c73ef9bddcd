"""Constantes e configuração da execução (credenciais vindas do ambiente)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

YOUTUBE_API_URL = "https://www.googleapis.com/youtube/v3"
TIMEOUT_SECS = 30
BATCH_SIZE_IDS = 50              # videos.list aceita até 50
PAGE_SIZE = 50                   # playlistItems.list aceita até 50
MIN_DURATION_SECS = 180          # abaixo disso conta como "short"
DEFAULT_OUTPUT_FILE = os.path.join("public", "youtube-data.json")

ENV_API_KEY = "YOUTUBE_API_KEY"
ENV_CHANNEL_ID = "YOUTUBE_CHANNEL_ID"


@dataclass(frozen=True)
class Settings:
    """Configuração imutável de uma execução, repassada a cada componente."""

    api_key: str
    channel_id: str
    output_file: str = DEFAULT_OUTPUT_FILE
    min_duration_secs: int = MIN_DURATION_SECS
    page_size: int = PAGE_SIZE

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "Settings":
        """Lê API key e channel id do ambiente (valores vazios viram "")."""
        env = os.environ if environ is None else environ
        return cls(
            api_key=(env.get(ENV_API_KEY) or "").strip(),
            channel_id=(env.get(ENV_CHANNEL_ID) or "").strip(),
            **overrides,
        )

    def missing(self) -> list[str]:
        """Nomes das variáveis obrigatórias ausentes."""
        out = []
        if not self.api_key:
            out.append(ENV_API_KEY)
        if not self.channel_id:
            out.append(ENV_CHANNEL_ID)
        return out
