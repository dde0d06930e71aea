from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from components.simple_date import DateOrder, SimpleDateField
from components.validators import FormValidator

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def validator() -> FormValidator:
    return FormValidator()


@pytest.fixture
def make_field() -> Callable[..., SimpleDateField]:
    def factory(name: str = "birth", value=None, order: DateOrder = DateOrder.DMY, **kwargs) -> SimpleDateField:
        return SimpleDateField(name, "Birth date", value, order=order, **kwargs)

    return factory


@pytest.fixture
def field(make_field: Callable[..., SimpleDateField]) -> SimpleDateField:
    return make_field()
