"""Configuração de logging compartilhada pelos entry points."""

from __future__ import annotations

import logging


def configure_logging(*, level: int | str = logging.INFO, force: bool = False) -> None:
    """Inicializa o logger raiz uma vez, com formato curto.

    ``level`` aceita o número ou o nome ("DEBUG"). Use ``force=True`` para
    reconfigurar em testes.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
