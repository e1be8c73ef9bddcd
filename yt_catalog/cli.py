"""Interface de linha de comando para gerar o catálogo de vídeos longos."""

import os
import sys
import logging
import argparse
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from .config import DEFAULT_OUTPUT_FILE, ENV_API_KEY, ENV_CHANNEL_ID, MIN_DURATION_SECS, Settings
from .pipeline import run_sync


def build_parser() -> argparse.ArgumentParser:
    """Monta o parser de argumentos da CLI."""
    p = argparse.ArgumentParser(
        description="Gera o JSON com os vídeos longos (>= 3 min) de um canal do YouTube")
    p.add_argument("--api-key", default=os.getenv(ENV_API_KEY),
                   help=f"YouTube Data API v3 Key (ou env {ENV_API_KEY})")
    p.add_argument("--channel-id", default=os.getenv(ENV_CHANNEL_ID),
                   help=f"ID do canal, ex.: UCxxxx (ou env {ENV_CHANNEL_ID})")
    p.add_argument("--output-file", default=DEFAULT_OUTPUT_FILE)
    p.add_argument("--min-duration", type=int, default=MIN_DURATION_SECS,
                   help="duração mínima em segundos (default: 180)")
    p.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "INFO"))
    return p


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Ponto de entrada da CLI; retorna o exit code (0 ok, 1 falha)."""
    # .env local não sobrescreve variáveis já definidas (ex.: no build)
    load_dotenv(find_dotenv(usecwd=True))
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    # flags têm prioridade; os defaults delas já vêm do ambiente
    settings = Settings.from_env(
        {ENV_API_KEY: args.api_key or "", ENV_CHANNEL_ID: args.channel_id or ""},
        output_file=args.output_file,
        min_duration_secs=args.min_duration,
    )
    outcome = run_sync(settings)
    return outcome.exit_code


if __name__ == "__main__":
    sys.exit(main())
