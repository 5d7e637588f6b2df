"""
Form Parsing

Pydantic models for the submitted HTML forms. Parsing happens before any
repository call; a missing or unparseable field raises MalformedInput.
"""
import re
from typing import Annotated, Any, List, Mapping, Type, TypeVar

from pydantic import BaseModel, BeforeValidator, ValidationError

from userdesk.modules.users.domain.user import User, UserFields

FormT = TypeVar("FormT", bound=BaseModel)

_DECIMAL_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*")


def _decimal_integer(value: Any) -> Any:
    # Lax int mode would also take "30.0" and "1_000".
    if isinstance(value, str) and not _DECIMAL_INTEGER.fullmatch(value):
        raise ValueError("must be a whole decimal number")
    return value


FormInt = Annotated[int, BeforeValidator(_decimal_integer)]


class MalformedInput(ValueError):
    """A required form field is missing or does not parse as its type."""

    def __init__(self, fields: List[str]):
        self.fields = fields
        super().__init__(f"Malformed or missing form field(s): {', '.join(fields)}")


class AddUserForm(BaseModel):
    name: str
    age: FormInt
    email: str

    def to_user(self) -> User:
        return User(name=self.name, age=self.age, email=self.email)


class EditUserForm(BaseModel):
    id: FormInt
    name: str
    age: FormInt
    email: str

    def to_fields(self) -> UserFields:
        return UserFields(name=self.name, age=self.age, email=self.email)


class DeleteUserForm(BaseModel):
    id: FormInt


def parse_form(model: Type[FormT], data: Mapping[str, Any]) -> FormT:
    """Validate raw form data against ``model``."""
    try:
        return model.model_validate(dict(data))
    except ValidationError as e:
        fields = []
        for error in e.errors():
            name = ".".join(str(part) for part in error["loc"])
            if name not in fields:
                fields.append(name)
        raise MalformedInput(fields) from e
