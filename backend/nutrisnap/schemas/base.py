"""
NutriSnap Backend - Request Schema Base
=========================================

What:  Shared entry point that turns a raw JSON body into a validated schema.
How:   Routes receive the body as plain JSON and call `Schema.from_payload(body)`.
       Pydantic failures are translated into the application's ValidationError,
       whose message is picked per failing field, so every malformed body yields
       the same `400 {"error": ...}` contract instead of FastAPI's 422.
"""

from typing import Annotated, Any, ClassVar, Dict, Optional, Union

from pydantic import AllowInfNan, BaseModel, Strict, StrictInt
from pydantic import ValidationError as SchemaError

from nutrisnap.exceptions import ValidationError

# JSON number, excluding booleans, NaN and infinities
Calories = Union[StrictInt, Annotated[float, Strict(), AllowInfNan(False)]]


class RequestSchema(BaseModel):
    """
    Base class for request bodies.

    Subclasses set:
        invalid_message: Fallback 400 message
        field_messages:  Per-field 400 messages, keyed by the first failing field
    """

    invalid_message: ClassVar[str] = "Invalid input"
    field_messages: ClassVar[Dict[str, str]] = {}

    @classmethod
    def from_payload(cls, payload: Any):
        """
        Validate a decoded JSON body.

        A body that is not a JSON object is treated as an empty object.

        Raises:
            ValidationError: with the message of the first failing field
        """
        body = payload if isinstance(payload, dict) else {}
        try:
            return cls.model_validate(body)
        except SchemaError as e:
            errors = e.errors(include_url=False)
            field = _first_field(errors)
            raise ValidationError(
                message=cls.field_messages.get(field, cls.invalid_message),
                field=field,
                context={"errors": [(err["loc"], err["type"]) for err in errors]},
            ) from e


def _first_field(errors) -> Optional[str]:
    for err in errors:
        if err["loc"]:
            return str(err["loc"][0])
    return None
