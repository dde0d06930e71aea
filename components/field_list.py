from __future__ import annotations
from typing import Iterable, Iterator, Optional, Protocol
import flet as ft

from components.forms import TextInputControl, safe_update


class FieldContainer(Protocol):
    def __iter__(self) -> Iterator[TextInputControl]: ...
    def replace_field(self, name: str, field: TextInputControl) -> bool: ...


class FieldList:
    """
    Lista ordenada de sub-campos para renderização.
    - A ordem aqui é a de exibição, não a de armazenamento.
    - control() devolve sempre o mesmo ft.Row, atualizado a cada troca.
    """
    def __init__(self, fields: Iterable[TextInputControl] = ()):
        self._fields: list[TextInputControl] = list(fields)
        self._row: ft.Row | None = None

    # -------- API pública --------
    def __iter__(self) -> Iterator[TextInputControl]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __getitem__(self, i: int) -> TextInputControl:
        return self._fields[i]

    def names(self) -> list[str]:
        return [f.name for f in self._fields]

    def field_by_name(self, name: str) -> Optional[TextInputControl]:
        for f in self._fields:
            if f.name == name:
                return f
        return None

    def replace_field(self, name: str, field: TextInputControl) -> bool:
        for i, f in enumerate(self._fields):
            if f.name == name:
                self._fields[i] = field
                self._refresh()
                return True
        return False

    def control(self, spacing: int = 8) -> ft.Row:
        if self._row is None:
            self._row = ft.Row(spacing=spacing, vertical_alignment=ft.CrossAxisAlignment.START)
        self._row.spacing = spacing
        self._row.controls = [f.control() for f in self._fields]
        return self._row

    # -------- interno --------
    def _refresh(self):
        if self._row is None:
            return
        self._row.controls = [f.control() for f in self._fields]
        safe_update(self._row)
