from __future__ import annotations

import pytest

from components.forms import TextInput
from components.simple_date import DatePart, FieldMessage, SimpleDateField
from components.validators import FormValidator


def test_prefixed_message_is_routed_to_part(field: SimpleDateField) -> None:
    field.set_message("[_Month]Bad month")

    assert field.month_field.message == "Bad month"
    assert field.message is None


def test_plain_message_stays_on_composite(field: SimpleDateField) -> None:
    field.set_message("Generic")

    assert field.message == "Generic"
    assert field.year_field.message is None
    assert field.month_field.message is None
    assert field.day_field.message is None


@pytest.mark.parametrize(
    ("message", "attr", "text"),
    [
        ("[_Year]Y", "year_field", "Y"),
        ("[_Month]M", "month_field", "M"),
        ("[_Day]D", "day_field", "D"),
    ],
)
def test_each_marker_targets_its_part(field: SimpleDateField, message: str, attr: str, text: str) -> None:
    field.set_message(message)

    assert getattr(field, attr).message == text


def test_first_marker_wins() -> None:
    msg = FieldMessage.parse("[_Year][_Day]odd")

    assert msg == FieldMessage("[_Day]odd", DatePart.YEAR)


def test_tagged_message_is_accepted_directly(field: SimpleDateField) -> None:
    field.set_message(FieldMessage("Day invalid", DatePart.DAY))

    assert field.day_field.message == "Day invalid"


def test_field_message_renders_marker() -> None:
    assert str(FieldMessage("Month invalid", DatePart.MONTH)) == "[_Month]Month invalid"
    assert str(FieldMessage("Please enter a valid date")) == "Please enter a valid date"


def test_message_type_and_cast_are_forwarded(field: SimpleDateField) -> None:
    field.set_message("[_Day]<b>x</b>", "warning", "html")

    assert field.day_field.message_type == "warning"
    assert field.day_field.message_cast == "html"


def test_part_message_sets_error_text_on_control(field: SimpleDateField) -> None:
    field.set_message("[_Year]Please enter a year")

    assert field.year_field.control().error_text == "Please enter a year"


def test_validator_routes_errors_back_to_parts(field: SimpleDateField, validator: FormValidator) -> None:
    field.set_submitted_value({"_Year": "2021", "_Month": "2", "_Day": "30"})
    field.validate(validator)

    routed = validator.apply([field])

    assert routed == 2
    assert field.day_field.message == "Day invalid"
    assert field.message == "Please enter a valid date"


def test_composite_message_shows_in_rendered_control(field: SimpleDateField) -> None:
    column = field.control()

    field.set_message("Please enter a valid date")

    error_line = column.controls[-1]
    assert error_line.value == "Please enter a valid date"
    assert error_line.visible is True


def test_clear_messages_resets_everything(field: SimpleDateField) -> None:
    field.set_message("[_Day]x").set_message("y")

    field.clear_messages()

    assert field.message is None
    assert field.day_field.message is None
    assert not field.day_field.control().error_text


def test_replaced_part_receives_routed_messages(field: SimpleDateField) -> None:
    replacement = TextInput("whatever", label="Dia")

    field.set_day_field(replacement)
    field.set_message("[_Day]Day invalid")

    assert replacement.message == "Day invalid"
