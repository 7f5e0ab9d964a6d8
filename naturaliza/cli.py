"""Interface de linha de comando do coletor de naturalizações."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from naturaliza.api import run
from naturaliza.container import build_container
from naturaliza.domain import SearchDate
from naturaliza.settings import get_settings


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Naturaliza - coletor de naturalizações do Diário Oficial"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Nível de log (default: NATURALIZA_LOG_LEVEL ou INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    fetch = subparsers.add_parser(
        "fetch", help="Consulta a edição de uma data e extrai as naturalizações"
    )
    fetch.add_argument(
        "--date",
        default=None,
        help="Data no formato DD-MM-YYYY. Se omitida usa a data atual.",
    )
    fetch.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Arquivo JSON de saída. Se omitido imprime no terminal.",
    )

    subparsers.add_parser("serve", help="Inicia a API HTTP")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    settings = get_settings()
    console = Console(stderr=True)
    level_name = args.log_level or settings.log_level
    handler = RichHandler(console=console, markup=True, rich_tracebacks=True)
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    logger = logging.getLogger("naturaliza.cli")

    if args.command == "serve":
        run()
        return

    search_date = SearchDate.normalize(args.date)
    container = build_container(settings)
    service = container.fetch_service.with_status_publisher(console.log)
    try:
        result = service.fetch(search_date)
    except Exception as exc:
        logger.error("Falha ao consultar %s: %s", search_date, exc)
        sys.exit(1)

    payload = result.to_payload()
    if args.output:
        _write_json(args.output, payload)
        console.print(
            f"[green]{len(result.results)} portarias salvas em {args.output}[/green]"
        )
    else:
        print(json.dumps(payload, ensure_ascii=False, indent=2))


def _write_json(path: Path, payload: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as stream:
        json.dump(payload, stream, ensure_ascii=False, indent=2)
        stream.write("\n")


if __name__ == "__main__":
    main()
