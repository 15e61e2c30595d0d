"""Shared record plumbing: pydantic base model, lax number types and the status object."""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter, model_validator

R = TypeVar("R", bound="Record")
T = TypeVar("T")

RESPONSE_OK = "ok"


def _to_int(value: Any) -> Any:
    """Accept blanks and numeric strings such as ``"12"`` or ``"12.0"``."""
    if value is None or value == "":
        return 0
    try:
        if isinstance(value, float):
            return int(value)
        if isinstance(value, str):
            text = value.strip()
            try:
                return int(text)
            except ValueError:
                return int(float(text))
    except OverflowError as e:
        raise ValueError(f"number out of range: {value!r}") from e
    return value


def _to_float(value: Any) -> Any:
    if value is None or value == "":
        return 0.0
    return value


def _to_bool(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes"}
    return value


LaxInt = Annotated[int, BeforeValidator(_to_int)]
LaxFloat = Annotated[float, BeforeValidator(_to_float)]
LaxBool = Annotated[bool, BeforeValidator(_to_bool)]


class Record(BaseModel):
    """Base for records decoded from Erply JSON.

    Fields carry their wire names as aliases. Unknown keys are ignored;
    missing or ``null`` keys keep the field default.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    @model_validator(mode="before")
    @classmethod
    def drop_null_values(cls, values: Any) -> Any:
        if isinstance(values, dict):
            return {k: v for k, v in values.items() if v is not None}
        return values

    @classmethod
    def from_dict(cls: Type[R], data: Dict[str, Any]) -> R:
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


def decode_records(record_type: Type[T], payload: Any) -> List[T]:
    """Decode a ``records`` array. ``null`` or a missing array is no records.

    Raises ``TypeError`` for a non-array payload and
    ``pydantic.ValidationError`` for a malformed record.
    """
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise TypeError(f"expected a records array, got {type(payload).__name__}")
    return TypeAdapter(List[record_type]).validate_python(payload)


class Status(Record):
    """The service's status descriptor, used for whole responses and bulk items."""

    request: str = Field("", alias="request")
    response_status: str = Field("", alias="responseStatus")
    error_code: LaxInt = Field(0, alias="errorCode")
    error_field: str = Field("", alias="errorField")
    request_unix_time: LaxInt = Field(0, alias="requestUnixTime")
    generation_time: LaxFloat = Field(0.0, alias="generationTime")
    records_total: LaxInt = Field(0, alias="recordsTotal")
    records_in_response: LaxInt = Field(0, alias="recordsInResponse")
    # Only set on bulk items
    request_name: str = Field("", alias="requestName")
    request_id: str = Field("", alias="requestID")

    @property
    def ok(self) -> bool:
        return self.response_status == RESPONSE_OK

    @property
    def message(self) -> str:
        request = self.request or self.request_name
        text = f"{request}: {self.response_status}"
        if self.error_field:
            text += f" (field {self.error_field})"
        return text


class ObjAttribute(Record):
    attribute_name: str = Field("", alias="attributeName")
    attribute_type: str = Field("", alias="attributeType")
    attribute_value: str = Field("", alias="attributeValue")
