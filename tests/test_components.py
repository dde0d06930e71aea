from __future__ import annotations

import flet as ft
import pytest

from components.field_list import FieldList
from components.forms import SelectInput, TextInput, TextInputControl, month_select
from components.masks import is_blank, pad_left, pad_part, pad_year
from components.simple_date import SimpleDateField


def test_text_input_maps_numeric_hint_to_keyboard() -> None:
    tf = TextInput("n").set_attribute("inputmode", "numeric")

    assert tf.control().keyboard_type == ft.KeyboardType.NUMBER


def test_text_input_pattern_becomes_input_filter() -> None:
    tf = TextInput("n").set_attribute("pattern", "[0-9]*")

    assert tf.control().input_filter.regex_string == "[0-9]*"


def test_text_input_value_round_trip() -> None:
    tf = TextInput("n", value="12")
    assert tf.value == "12"

    tf.set_value(None)
    assert tf.value == ""


def test_inputs_honor_protocol() -> None:
    assert isinstance(TextInput("a"), TextInputControl)
    assert isinstance(month_select("b"), TextInputControl)


def test_month_select_lists_twelve_months() -> None:
    sel = month_select("m")

    assert [k for k, _ in sel.options] == [f"{m:02d}" for m in range(1, 13)]
    sel.set_value("03")
    assert sel.value == "03"
    sel.set_value("")
    assert sel.value == ""


def test_select_input_message_sets_error_text() -> None:
    sel = SelectInput("s", options=[("a", "A")])

    sel.set_message("required")

    assert sel.control().error_text == "required"


def test_field_list_replace_by_name() -> None:
    a, b = TextInput("a"), TextInput("b")
    fields = FieldList([a, b])
    new_b = TextInput("b")

    assert fields.replace_field("b", new_b) is True
    assert fields[1] is new_b
    assert fields.replace_field("zzz", TextInput("zzz")) is False
    assert fields.names() == ["a", "b"]


def test_field_list_control_follows_replacements() -> None:
    a, b = TextInput("a"), TextInput("b")
    fields = FieldList([a, b])
    row = fields.control()
    c = TextInput("b")

    fields.replace_field("b", c)

    assert row.controls == [a.control(), c.control()]


def test_field_by_name() -> None:
    a = TextInput("a")
    fields = FieldList([a])

    assert fields.field_by_name("a") is a
    assert fields.field_by_name("b") is None


def test_replacement_is_renamed_and_swapped_into_container(make_field) -> None:
    field: SimpleDateField = make_field()
    sel = month_select()

    field.set_month_field(sel)

    assert sel.name == "birth[_Month]"
    assert field.month_field is sel
    assert field.children[1] is sel


def test_replacement_takes_part_of_submission(make_field) -> None:
    field: SimpleDateField = make_field()
    field.set_month_field(month_select())

    field.set_submitted_value({"_Year": "2020", "_Month": "4", "_Day": "1"})

    assert field.month_field.value == "04"
    assert field.value == "2020-04-01"


def test_set_children_wraps_plain_lists(make_field) -> None:
    field: SimpleDateField = make_field()

    field.set_children([field.year_field, field.day_field])

    assert isinstance(field.children, FieldList)
    assert field.children.names() == ["birth[_Year]", "birth[_Day]"]


def test_rendered_control_contains_title_and_row(make_field) -> None:
    field: SimpleDateField = make_field()

    column = field.control()

    assert column.controls[0].value == "Birth date"
    assert isinstance(column.controls[1], ft.Row)
    assert column.controls[1].controls[0] is field.day_field.control()


@pytest.mark.parametrize(
    ("value", "expected"),
    [("", ""), ("1", "01"), ("12", "12"), ("123", "123")],
)
def test_pad_part(value: str, expected: str) -> None:
    assert pad_part(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [("", ""), ("5", "1915"), ("19", "1919"), ("99", "1999"), ("123", "1123"), ("2001", "2001")],
)
def test_pad_year(value: str, expected: str) -> None:
    assert pad_year(value) == expected


def test_pad_left_with_multi_char_pad() -> None:
    assert pad_left("7", 6, "ab") == "ababa7"


@pytest.mark.parametrize(("value", "expected"), [("", True), (None, True), ("0", True), ("00", False), ("7", False)])
def test_is_blank_treats_single_zero_as_empty(value, expected: bool) -> None:
    assert is_blank(value) is expected


def test_zero_parts_are_not_padded() -> None:
    assert pad_year("0") == ""
    assert pad_part("0") == ""
