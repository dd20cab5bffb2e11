from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from clubhub.exceptions import ValidationError


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys while keeping snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )


def reject_null(value):
    # Partial updates may omit a field but never blank out a required column
    if value is None:
        raise ValueError("may not be null")
    return value


def load_payload(schema, data: dict):
    try:
        return schema.model_validate(data or {})
    except PydanticValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        raise ValidationError(f"Invalid fields: {', '.join(fields)}", fields=fields)


def dump(schema, obj) -> dict:
    return schema.model_validate(obj).model_dump(by_alias=True)


def dump_many(schema, objs) -> list:
    return [dump(schema, obj) for obj in objs]
