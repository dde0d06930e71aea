# === components/simple_date.py ===
"""
Campo de data composto por três caixas de texto (dia, mês, ano).

O valor composto é sempre guardado como "AAAA-MM-DD" (ordem ano-mês-dia),
mesmo quando algum pedaço está vazio ("2019--01"). A ordem de exibição
(DMY/YMD/MDY) só afeta a renderização.
"""
from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping, Optional
import flet as ft

from components.field_list import FieldList
from components.forms import TextInput, TextInputControl, safe_update
from components.masks import is_blank, pad_part, pad_year
from components.validators import days_in_month, is_valid_iso_date, to_int
from services.i18n import default_lookup

log = logging.getLogger(__name__)

_ymd_rx = re.compile(r"^(?P<year>\d*)-(?P<month>\d*)-(?P<day>\d*)$")
_numeric_rx = re.compile(r"^\s*[+-]?\d+(\.\d+)?\s*$")


class InvalidArgumentError(ValueError):
    """Valor programático que não é data ISO, timestamp nem vazio."""


class ParseMode(Enum):
    STRICT = "strict"    # set_value() chamado pelo código
    LENIENT = "lenient"  # valor vindo do usuário: nunca levanta erro


class DateOrder(Enum):
    DMY = 1
    YMD = 2
    MDY = 3

    @classmethod
    def parse(cls, text) -> "DateOrder":
        if isinstance(text, cls):
            return text
        s = str(text).strip()
        if s.isdigit():
            return cls(int(s))
        try:
            return cls[s.upper()]
        except KeyError:
            raise ValueError(f"Ordem de data desconhecida: {text!r} (use DMY, YMD ou MDY)") from None


class DatePart(Enum):
    YEAR = "Year"
    MONTH = "Month"
    DAY = "Day"

    @property
    def key(self) -> str:
        return f"_{self.value}"

    @property
    def marker(self) -> str:
        return f"[_{self.value}]"


# prefixos checados nesta ordem
_MARKER_ORDER = (DatePart.YEAR, DatePart.MONTH, DatePart.DAY)

_DISPLAY = {
    DateOrder.DMY: (DatePart.DAY, DatePart.MONTH, DatePart.YEAR),
    DateOrder.YMD: (DatePart.YEAR, DatePart.MONTH, DatePart.DAY),
    DateOrder.MDY: (DatePart.MONTH, DatePart.DAY, DatePart.YEAR),
}


@dataclass(frozen=True)
class FieldMessage:
    """Mensagem com destino explícito: o campo composto (part=None) ou uma das partes."""
    text: str
    part: Optional[DatePart] = None

    def __str__(self) -> str:
        return f"{self.part.marker}{self.text}" if self.part else self.text

    @classmethod
    def parse(cls, message: str) -> "FieldMessage":
        for part in _MARKER_ORDER:
            if message.startswith(part.marker):
                return cls(message[len(part.marker):], part)
        return cls(message)


class SimpleDateField:
    schema_data_type = "Date"

    def __init__(self, name: str, title: str | None = None, value: Any = None,
                 order: DateOrder = DateOrder.DMY, lookup=None):
        self.name = name
        self.title = title if title is not None else name
        self.order = DateOrder.parse(order)
        self.message: Optional[str] = None
        self.message_type = "error"
        self.message_cast = "text"
        self._t = lookup or default_lookup
        self._value: Optional[str] = None
        self._raw_value: Any = None
        self._column: ft.Column | None = None
        self._error_line: ft.Text | None = None

        labels = {
            DatePart.DAY: self._t("SimpleDateField.DayLabel", "Day"),
            DatePart.MONTH: self._t("SimpleDateField.MonthLabel", "Month"),
            DatePart.YEAR: self._t("SimpleDateField.YearLabel", "Year"),
        }
        self._parts: dict[DatePart, TextInputControl] = {}
        for part in _MARKER_ORDER:
            tf = TextInput(self.part_name(part), label=labels[part], width=90 if part is DatePart.YEAR else 70)
            tf.set_attribute("inputmode", "numeric").set_attribute("pattern", "[0-9]*")
            self._parts[part] = tf

        self._children = FieldList(self._parts[p] for p in _DISPLAY[self.order])

        if value is not None:
            self.set_value(value)

    # -------- nomes / sub-campos --------
    def part_name(self, part: DatePart) -> str:
        return f"{self.name}{part.marker}"

    @property
    def day_field(self) -> TextInputControl:
        return self._parts[DatePart.DAY]

    @property
    def month_field(self) -> TextInputControl:
        return self._parts[DatePart.MONTH]

    @property
    def year_field(self) -> TextInputControl:
        return self._parts[DatePart.YEAR]

    def set_day_field(self, field: TextInputControl) -> "SimpleDateField":
        return self._replace_part(DatePart.DAY, field)

    def set_month_field(self, field: TextInputControl) -> "SimpleDateField":
        return self._replace_part(DatePart.MONTH, field)

    def set_year_field(self, field: TextInputControl) -> "SimpleDateField":
        return self._replace_part(DatePart.YEAR, field)

    def _replace_part(self, part: DatePart, field: TextInputControl) -> "SimpleDateField":
        name = self.part_name(part)
        field.name = name
        self._parts[part] = field
        if not self._children.replace_field(name, field):
            log.debug("Container de %s não tem %s; só a referência foi trocada", self.name, name)
        return self

    @property
    def children(self) -> FieldList:
        return self._children

    def set_children(self, children) -> "SimpleDateField":
        if not isinstance(children, FieldList):
            children = FieldList(children)
        self._children = children
        self._sync_column()
        return self

    def set_order(self, order) -> "SimpleDateField":
        self.order = DateOrder.parse(order)
        return self.set_children([self._parts[p] for p in _DISPLAY[self.order]])

    # -------- valor --------
    @property
    def value(self) -> Optional[str]:
        return self._value

    @property
    def raw_value(self) -> Any:
        return self._raw_value

    def data_value(self) -> Optional[str]:
        return self._value if is_valid_iso_date(self._value) else None

    def set_value(self, value: Any, mode: ParseMode = ParseMode.STRICT) -> "SimpleDateField":
        if is_blank(value):
            self._value = None
            return self

        try:
            value = self._coerce(value)
        except (OverflowError, OSError, ValueError) as ex:
            if mode is ParseMode.LENIENT:
                self._value = None
                return self
            raise InvalidArgumentError(f"Invalid date: {value!r}. Use YYYY-MM-DD to prevent this error.") from ex

        m = _ymd_rx.match(value) if isinstance(value, str) else None
        if m is None:
            if mode is ParseMode.STRICT:
                raise InvalidArgumentError(f"Invalid date: {value!r}. Use YYYY-MM-DD to prevent this error.")
            # veio do usuário (ex.: letras): fica sem valor
            log.debug("%s: valor descartado %r", self.name, value)
            self._value = None
            return self

        year, month, day = m.group("year"), m.group("month"), m.group("day")
        if is_blank(year) and is_blank(month) and is_blank(day):
            self._value = None
            return self

        self._value = f"{year}-{month}-{day}"
        self.year_field.set_value(year)
        self.month_field.set_value(month)
        self.day_field.set_value(day)
        return self

    @staticmethod
    def _coerce(value: Any) -> Any:
        if isinstance(value, datetime):
            return value.date().isoformat()
        if isinstance(value, date):
            return value.isoformat()
        # timestamps (bool não conta)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return datetime.fromtimestamp(value).date().isoformat()
        if isinstance(value, str) and _numeric_rx.match(value):
            return datetime.fromtimestamp(float(value)).date().isoformat()
        return value

    def set_submitted_value(self, value: Any) -> "SimpleDateField":
        self._raw_value = value
        self._value = None

        if not isinstance(value, Mapping):
            return self

        def _get(part: DatePart) -> str:
            v = value.get(part.key)
            return "" if v is None else str(v)

        year = pad_year(_get(DatePart.YEAR))
        month = pad_part(_get(DatePart.MONTH))
        day = pad_part(_get(DatePart.DAY))

        self.year_field.set_value(year)
        self.month_field.set_value(month)
        self.day_field.set_value(day)

        # pode sair incompleto ("2019--01"); validate() trata disso
        return self.set_value(f"{year}-{month}-{day}", mode=ParseMode.LENIENT)

    def submit_inputs(self) -> "SimpleDateField":
        """Lê o que foi digitado nas três caixas e processa como envio do usuário."""
        raw = {part.key: self._parts[part].value for part in _MARKER_ORDER}
        return self.set_submitted_value(raw)

    # -------- validação --------
    def is_empty(self) -> bool:
        raw = self._raw_value
        if not isinstance(raw, Mapping):
            return True
        return all(is_blank(raw.get(k)) for k in ("_Day", "_Month", "_Year"))

    def validate(self, validator) -> bool:
        if self.is_empty():
            return True

        if self._value and is_valid_iso_date(self._value):
            return True

        year = to_int(self.year_field.value)
        month = to_int(self.month_field.value)
        day = to_int(self.day_field.value)

        errors: list[FieldMessage] = []
        if not year:
            errors.append(FieldMessage(self._t("SimpleDateField.ErrorMissingYear", "Please enter a year"), DatePart.YEAR))

        if not month:
            errors.append(FieldMessage(self._t("SimpleDateField.ErrorMissingMonth", "Please enter a month"), DatePart.MONTH))
        elif not 1 <= month <= 12:
            errors.append(FieldMessage(self._t("SimpleDateField.ErrorInvalidMonth", "Month invalid"), DatePart.MONTH))
        elif year:
            days = days_in_month(year, month)
            if days is not None and day > days:
                errors.append(FieldMessage(self._t("SimpleDateField.ErrorInvalidDay", "Day invalid"), DatePart.DAY))

        if not day:
            errors.append(FieldMessage(self._t("SimpleDateField.ErrorMissingDay", "Please enter a day"), DatePart.DAY))

        errors.append(FieldMessage(self._t("SimpleDateField.ErrorInvalidDate", "Please enter a valid date")))

        for msg in errors:
            validator.validation_error(self.name, msg)
        log.info("%s: data inválida %r (%d mensagens)", self.name, self._value, len(errors))
        return False

    # -------- mensagens --------
    def set_message(self, message, message_type: str = "error", message_cast: str = "text") -> "SimpleDateField":
        if message is None or message == "":
            msg = FieldMessage("")
        elif isinstance(message, FieldMessage):
            msg = message
        else:
            msg = FieldMessage.parse(str(message))

        if msg.part is not None:
            self._parts[msg.part].set_message(msg.text, message_type, message_cast)
            return self

        self.message = msg.text or None
        self.message_type = message_type
        self.message_cast = message_cast
        if self._error_line is not None:
            self._error_line.value = self.message or ""
            self._error_line.visible = bool(self.message)
            safe_update(self._error_line)
        return self

    def clear_messages(self) -> "SimpleDateField":
        for part in _MARKER_ORDER:
            self._parts[part].set_message(None)
        return self.set_message(None)

    # -------- renderização --------
    def control(self) -> ft.Column:
        if self._column is None:
            self._error_line = ft.Text(self.message or "", size=12, color=ft.Colors.ERROR,
                                       visible=bool(self.message))
            self._column = ft.Column(spacing=4)
        self._sync_column()
        return self._column

    def _sync_column(self):
        if self._column is None:
            return
        self._column.controls = [
            ft.Text(self.title, size=12, color=ft.Colors.ON_SURFACE_VARIANT),
            self._children.control(),
            self._error_line,
        ]
        safe_update(self._column)

    def __repr__(self) -> str:
        return f"SimpleDateField(name={self.name!r}, value={self._value!r}, order={self.order.name})"
