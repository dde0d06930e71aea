# === services/i18n.py ===
from __future__ import annotations
import logging
from typing import Callable, Mapping

log = logging.getLogger(__name__)

Lookup = Callable[[str, str], str]

PT_BR: dict[str, str] = {
    "SimpleDateField.DayLabel": "Dia",
    "SimpleDateField.MonthLabel": "Mês",
    "SimpleDateField.YearLabel": "Ano",
    "SimpleDateField.ErrorMissingYear": "Informe o ano",
    "SimpleDateField.ErrorMissingMonth": "Informe o mês",
    "SimpleDateField.ErrorInvalidMonth": "Mês inválido",
    "SimpleDateField.ErrorInvalidDay": "Dia inválido",
    "SimpleDateField.ErrorMissingDay": "Informe o dia",
    "SimpleDateField.ErrorInvalidDate": "Informe uma data válida",
}

CATALOGS: dict[str, Mapping[str, str]] = {
    "pt_BR": PT_BR,
}

def default_lookup(key: str, default: str) -> str:
    return default

def catalog_lookup(catalog: Mapping[str, str]) -> Lookup:
    def _lookup(key: str, default: str) -> str:
        return catalog.get(key) or default
    return _lookup

def get_lookup(locale: str | None) -> Lookup:
    """Resolve o locale ("pt_BR", "pt-br", "en"...) para uma função de tradução."""
    norm = (locale or "").replace("-", "_")
    if not norm or norm.lower().startswith("en"):
        return default_lookup
    for name, catalog in CATALOGS.items():
        if name.lower() == norm.lower():
            return catalog_lookup(catalog)
    log.warning("Locale sem catálogo: %r (usando textos padrão)", locale)
    return default_lookup
