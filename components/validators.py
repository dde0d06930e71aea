# === components/validators.py ===
from __future__ import annotations
import calendar
import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

log = logging.getLogger(__name__)

_int_rx = re.compile(r"^\s*([+-]?\d+)")

def to_int(s) -> int:
    """Conversão tolerante: "12abc" -> 12, "abc" -> 0, None -> 0."""
    if isinstance(s, bool):
        return int(s)
    if isinstance(s, int):
        return s
    m = _int_rx.match(str(s or ""))
    return int(m.group(1)) if m else 0

def is_valid_iso_date(s: str) -> bool:
    if not s:
        return False
    try:
        return date.fromisoformat(s).isoformat() == s
    except ValueError:
        return False

def days_in_month(year: int, month: int) -> Optional[int]:
    # calendar só cobre 1..9999
    if not (1 <= year <= 9999 and 1 <= month <= 12):
        return None
    return calendar.monthrange(year, month)[1]


@dataclass(frozen=True)
class ValidationError:
    field_name: str
    message: str
    message_type: str = "error"


class FormValidator:
    """
    Coleta erros de validação por nome de campo.
    - validation_error(nome, mensagem) é chamado pelos campos durante validate()
    - apply(campos) devolve cada mensagem ao campo correspondente via set_message()
    """
    def __init__(self):
        self._errors: list[ValidationError] = []

    @property
    def errors(self) -> list[ValidationError]:
        return list(self._errors)

    def validation_error(self, field_name: str, message, message_type: str = "error") -> None:
        self._errors.append(ValidationError(field_name, str(message), message_type))

    def is_valid(self) -> bool:
        return not self._errors

    def messages_for(self, field_name: str) -> list[str]:
        return [e.message for e in self._errors if e.field_name == field_name]

    def clear(self) -> None:
        self._errors.clear()

    def apply(self, fields: Iterable) -> int:
        by_name = {f.name: f for f in fields}
        routed = 0
        for err in self._errors:
            target = by_name.get(err.field_name)
            if target is None:
                log.warning("Erro para campo desconhecido %r: %s", err.field_name, err.message)
                continue
            target.set_message(err.message, err.message_type)
            routed += 1
        return routed
