# components/forms.py  (campos de texto + contrato usado pelo SimpleDateField)
from __future__ import annotations
from typing import Any, Optional, Protocol, runtime_checkable
import flet as ft

# ----------------- util -----------------
def safe_update(ctrl: ft.Control) -> None:
    # update() falha enquanto o controle não está numa página
    try:
        ctrl.update()
    except AssertionError:
        pass
    except Exception:
        pass

# ----------------- componentes visuais -----------------
def FieldRow(label: str, control: ft.Control, width: int | None = None) -> ft.Container:
    return ft.Container(
        width=width,
        content=ft.Column(
            spacing=4,
            controls=[
                ft.Text(label, size=12, color=ft.Colors.ON_SURFACE_VARIANT),
                control,
            ],
        ),
    )

def snack_ok(page: ft.Page, msg: str) -> None:
    page.snack_bar = ft.SnackBar(content=ft.Text(msg), bgcolor=ft.Colors.GREEN_600)
    page.snack_bar.open = True
    page.update()

def snack_err(page: ft.Page, msg: str) -> None:
    page.snack_bar = ft.SnackBar(content=ft.Text(msg), bgcolor=ft.Colors.ERROR)
    page.snack_bar.open = True
    page.update()

# ----------------- contrato -----------------
@runtime_checkable
class TextInputControl(Protocol):
    name: str

    @property
    def value(self) -> str: ...

    @property
    def message(self) -> Optional[str]: ...

    def set_value(self, value: Any) -> "TextInputControl": ...

    def set_message(self, message: Optional[str], message_type: str = "error",
                    message_cast: str = "text") -> "TextInputControl": ...

    def set_attribute(self, name: str, value: Any) -> "TextInputControl": ...

    def control(self) -> ft.Control: ...


class _InputBase:
    """Estado comum: nome, atributos HTML-like e mensagem de validação."""
    def __init__(self, name: str, label: str = ""):
        self.name = name
        self.label = label
        self.attributes: dict[str, Any] = {}
        self.message: Optional[str] = None
        self.message_type: str = "error"
        self.message_cast: str = "text"

    def set_message(self, message: Optional[str], message_type: str = "error", message_cast: str = "text"):
        self.message = str(message) if message else None
        self.message_type = message_type
        self.message_cast = message_cast
        ctrl = self.control()
        ctrl.error_text = self.message
        safe_update(ctrl)
        return self

    def set_attribute(self, name: str, value: Any):
        self.attributes[name] = value
        self._apply_attribute(name, value)
        return self

    def _apply_attribute(self, name: str, value: Any) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, value={self.value!r})"


class TextInput(_InputBase):
    def __init__(self, name: str, label: str = "", value: str = "", width: int | None = None, **kw):
        super().__init__(name, label)
        self._tf = ft.TextField(label=label, value=value or "", width=width, dense=True, **kw)

    @property
    def value(self) -> str:
        return self._tf.value or ""

    def set_value(self, value: Any):
        self._tf.value = "" if value is None else str(value)
        safe_update(self._tf)
        return self

    def _apply_attribute(self, name: str, value: Any) -> None:
        if name == "inputmode" and value == "numeric":
            self._tf.keyboard_type = ft.KeyboardType.NUMBER
        elif name == "pattern":
            self._tf.input_filter = ft.InputFilter(allow=True, regex_string=str(value), replacement_string="")
        elif name == "placeholder":
            self._tf.hint_text = str(value)
        elif name == "maxlength":
            self._tf.max_length = int(value)

    def control(self) -> ft.TextField:
        return self._tf


class SelectInput(_InputBase):
    """Substituto mais rico para um TextInput (ex.: mês num Dropdown)."""
    def __init__(self, name: str, label: str = "", options: list[tuple[str, str]] | None = None,
                 value: str = "", width: int | None = None):
        super().__init__(name, label)
        self.options = list(options or [])
        self._dd = ft.Dropdown(
            label=label, dense=True, width=width, value=value or None,
            options=[ft.dropdown.Option(key=k, text=t) for k, t in self.options],
        )

    @property
    def value(self) -> str:
        return self._dd.value or ""

    def set_value(self, value: Any):
        self._dd.value = str(value) if value not in (None, "") else None
        safe_update(self._dd)
        return self

    def control(self) -> ft.Dropdown:
        return self._dd


def month_select(name: str = "", label: str = "Month", width: int | None = 120) -> SelectInput:
    opts = [(f"{m:02d}", f"{m:02d}") for m in range(1, 13)]
    return SelectInput(name, label=label, options=opts, width=width)
