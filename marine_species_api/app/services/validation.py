"""Text field checks shared by the services."""

import logging
from typing import List

from pydantic import BaseModel

from marine_species_api.app.core.errors import InvalidInput, ValidationFailed

logger = logging.getLogger(__name__)


def empty_text_fields(payload: BaseModel) -> List[str]:
    """Return the wire names of every text field of ``payload`` that is empty."""
    empty: List[str] = []
    for name, field in type(payload).model_fields.items():
        if field.annotation is str and not getattr(payload, name):
            empty.append(field.alias or name)
    return empty


def require_text_fields(payload: BaseModel, entity: str) -> None:
    """Raise ``ValidationFailed`` naming the empty fields, if there are any."""
    empty = empty_text_fields(payload)
    if empty:
        logger.warning("Rejected %s payload, empty fields: %s", entity, ", ".join(empty))
        raise ValidationFailed(f"{', '.join(empty)}: must not be empty")


def unencodable_text_fields(payload: BaseModel) -> List[str]:
    """Return the wire names of text fields that cannot be encoded as UTF-8.

    JSON allows lone surrogate escapes such as ``"\\ud800"``; they decode
    to Python strings that no UTF-8 encoder accepts.
    """
    bad: List[str] = []
    for name, field in type(payload).model_fields.items():
        if field.annotation is not str:
            continue
        try:
            getattr(payload, name).encode("utf-8")
        except UnicodeEncodeError:
            bad.append(field.alias or name)
    return bad


def require_valid_text(payload: BaseModel, entity: str) -> None:
    """Check every text field of ``payload`` before it is written.

    Empty fields raise ``ValidationFailed``; text that is not valid
    Unicode raises ``InvalidInput``.
    """
    require_text_fields(payload, entity)
    bad = unencodable_text_fields(payload)
    if bad:
        logger.warning("Rejected %s payload, unencodable text in: %s", entity, ", ".join(bad))
        raise InvalidInput(f"{', '.join(bad)}: not valid unicode text")
