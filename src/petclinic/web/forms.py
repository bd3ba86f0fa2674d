"""
Helpers for validating submitted HTML forms against Pydantic schemas.
"""

from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from ..exceptions import format_validation_errors

SchemaT = TypeVar("SchemaT", bound=BaseModel)


async def read_form(request: Request) -> Dict[str, Any]:
    """Submitted form fields as a plain dict of strings."""
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


def validate_form(
    schema: Type[SchemaT], values: Dict[str, Any]
) -> Tuple[Optional[SchemaT], Dict[str, List[str]]]:
    """
    Validate form values.

    Returns:
        ``(form, {})`` on success, ``(None, errors)`` otherwise, with errors
        keyed by form field name
    """
    try:
        return schema.model_validate(values), {}
    except ValidationError as e:
        return None, format_validation_errors(e.errors())
