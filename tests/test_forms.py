import pytest

from userdesk.modules.users.api.forms import (
    AddUserForm,
    DeleteUserForm,
    EditUserForm,
    MalformedInput,
    parse_form,
)
from userdesk.modules.users.domain.user import User, UserFields


def test_add_form_parses_integer_age():
    form = parse_form(AddUserForm, {"name": "Ann", "age": "30", "email": "a@x.com"})

    assert form.to_user() == User(name="Ann", age=30, email="a@x.com")


def test_add_form_accepts_empty_name_and_negative_age():
    form = parse_form(AddUserForm, {"name": "", "age": "-1", "email": ""})

    assert (form.name, form.age, form.email) == ("", -1, "")


@pytest.mark.parametrize("age", ["abc", "", "3.5", "30.0", "1_000"])
def test_add_form_rejects_non_integer_age(age):
    with pytest.raises(MalformedInput) as exc:
        parse_form(AddUserForm, {"name": "Ann", "age": age, "email": "a@x.com"})

    assert exc.value.fields == ["age"]


def test_missing_fields_are_all_reported():
    with pytest.raises(MalformedInput) as exc:
        parse_form(EditUserForm, {"id": "1"})

    assert exc.value.fields == ["name", "age", "email"]


def test_edit_form_to_fields():
    form = parse_form(EditUserForm, {"id": "7", "name": "Bo", "age": "25", "email": "b@x.com"})

    assert form.id == 7
    assert form.to_fields() == UserFields(name="Bo", age=25, email="b@x.com")


def test_delete_form_rejects_non_integer_id():
    with pytest.raises(MalformedInput) as exc:
        parse_form(DeleteUserForm, {"id": "abc"})

    assert "id" in str(exc.value)
    assert isinstance(exc.value, ValueError)


@pytest.mark.parametrize("raw_id", ["1_000", "2.0"])
def test_id_must_be_a_whole_decimal_number(raw_id):
    with pytest.raises(MalformedInput) as exc:
        parse_form(DeleteUserForm, {"id": raw_id})

    assert exc.value.fields == ["id"]
