from __future__ import annotations
import logging
import os
import flet as ft

from components.forms import FieldRow, month_select, snack_err, snack_ok
from components.simple_date import DateOrder, SimpleDateField
from components.validators import FormValidator
from services.i18n import get_lookup
from services.settings import Settings

log = logging.getLogger(__name__)


def build_fields(settings: Settings) -> list[SimpleDateField]:
    lookup = get_lookup(settings.locale)
    fields = [
        SimpleDateField("nascimento", "Data de nascimento", order=settings.date_order, lookup=lookup),
        SimpleDateField("abertura", "Abertura (AAAA-MM-DD)", "2024-02-29", order=DateOrder.YMD, lookup=lookup),
        SimpleDateField("validade", "Validade (MM/DD/AAAA)", order=DateOrder.MDY, lookup=lookup),
    ]
    # mês como Dropdown na validade
    fields[2].set_month_field(month_select(label=lookup("SimpleDateField.MonthLabel", "Month")))
    return fields


def validate_all(fields: list[SimpleDateField]) -> FormValidator:
    validator = FormValidator()
    for f in fields:
        f.clear_messages()
        f.submit_inputs()
        f.validate(validator)
    validator.apply(fields)
    return validator


def main(page: ft.Page):
    settings = Settings.from_environment()
    page.title = "Campo de data simples"
    page.padding = 24
    page.scroll = ft.ScrollMode.AUTO
    page.theme_mode = ft.ThemeMode.LIGHT

    fields = build_fields(settings)
    result = ft.Text("", size=13)

    def _on_validate(e=None):
        validator = validate_all(fields)
        result.value = " | ".join(f"{f.name}={f.data_value() or '-'}" for f in fields)
        if validator.is_valid():
            snack_ok(page, "Datas válidas")
        else:
            snack_err(page, f"{len(validator.errors)} erro(s) encontrados")
        page.update()

    if os.environ.get("APP_MINIMAL") == "1":
        page.add(ft.Text("Minimal OK", size=20, weight=ft.FontWeight.W_700))
        return

    page.add(
        ft.Column(
            spacing=16,
            controls=[
                ft.Text("Campo de data simples", size=20, weight=ft.FontWeight.BOLD),
                *[f.control() for f in fields],
                ft.Row(spacing=8, controls=[ft.ElevatedButton("Validar", icon=ft.Icons.CHECK, on_click=_on_validate)]),
                FieldRow("Valores", result),
            ],
        )
    )
    log.info("Página montada com %d campos (ordem padrão %s)", len(fields), settings.date_order.name)
