"""Request-body validation for Falcon resource adapters.

Bodies are validated strictly against a tuple of ``BodyField`` specs: the
media must be a JSON object, unknown keys are rejected, required keys must be
present and every value must have the declared JSON type. Keys that are
absent stay absent in the result, which is how partial updates tell an
omitted field from one explicitly set to ``null``.

Examples
--------
>>> values = parse_body({"title": "Dark"}, SHOW_CREATE_FIELDS)
>>> CreateShowRequest(**values)
CreateShowRequest(title='Dark', year=None)
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import falcon

if typ.TYPE_CHECKING:
    from .types import JsonPayload

INVALID_BODY_MESSAGE = "Invalid request body"

# Integer columns are signed 64-bit.
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


@dc.dataclass(frozen=True, slots=True)
class BodyField:
    """Validation rule for one JSON body key.

    Attributes
    ----------
    name : str
        JSON key.
    kind : type[str] | type[int]
        Expected JSON type. Booleans never satisfy ``int``, and integers
        must fit a signed 64-bit column.
    required : bool
        Whether the key must be present.
    nullable : bool
        Whether ``null`` is accepted.
    """

    name: str
    kind: type[str] | type[int]
    required: bool = False
    nullable: bool = False

    def accepts(self, value: object) -> bool:
        """Return True when ``value`` satisfies this rule."""
        if value is None:
            return self.nullable
        if isinstance(value, bool) or not isinstance(value, self.kind):
            return False
        if isinstance(value, int):
            return _INT_MIN <= value <= _INT_MAX
        return True


SHOW_CREATE_FIELDS: typ.Final = (
    BodyField("title", str, required=True),
    BodyField("year", int),
)
SHOW_UPDATE_FIELDS: typ.Final = (
    BodyField("title", str),
    BodyField("year", int, nullable=True),
)
SEASON_CREATE_FIELDS: typ.Final = (
    BodyField("show_id", str, required=True),
    BodyField("season_number", int, required=True),
)
SEASON_UPDATE_FIELDS: typ.Final = (
    BodyField("show_id", str),
    BodyField("season_number", int),
)
EPISODE_CREATE_FIELDS: typ.Final = (
    BodyField("show_id", str, required=True),
    BodyField("season_id", str, required=True),
    BodyField("episode_number", int, required=True),
)
EPISODE_UPDATE_FIELDS: typ.Final = (
    BodyField("show_id", str),
    BodyField("season_id", str),
    BodyField("episode_number", int),
)


def _invalid_body() -> falcon.HTTPBadRequest:
    return falcon.HTTPBadRequest(description=INVALID_BODY_MESSAGE)


async def read_body(req: falcon.Request) -> object:
    """Return the decoded request media, or None for an empty body.

    Raises
    ------
    falcon.HTTPBadRequest
        Raised when the body cannot be decoded.
    """
    try:
        return await req.get_media(default_when_empty=None)
    except falcon.MediaMalformedError as exc:
        raise _invalid_body() from exc


def require_payload_dict(payload: object) -> JsonPayload:
    """Validate that request media is a JSON object.

    Raises
    ------
    falcon.HTTPBadRequest
        Raised when the media is missing or not a JSON object.
    """
    if not isinstance(payload, dict):
        raise _invalid_body()
    return typ.cast("JsonPayload", payload)


def parse_body(payload: object, fields: tuple[BodyField, ...]) -> JsonPayload:
    """Validate a request body and return the keys that were supplied.

    Parameters
    ----------
    payload : object
        Parsed Falcon request media.
    fields : tuple[BodyField, ...]
        Accepted keys and their rules.

    Returns
    -------
    JsonPayload
        The validated key/value pairs, without absent optional keys.

    Raises
    ------
    falcon.HTTPBadRequest
        Raised for non-object bodies, unknown or missing keys, and values of
        the wrong type.
    """
    body = require_payload_dict(payload)
    rules = {field.name: field for field in fields}
    if not body.keys() <= rules.keys():
        raise _invalid_body()

    values: JsonPayload = {}
    for name, rule in rules.items():
        if name not in body:
            if rule.required:
                raise _invalid_body()
            continue
        if not rule.accepts(body[name]):
            raise _invalid_body()
        values[name] = body[name]
    return values
