"""Declarative request validation for DRF views.

A route declares an ordered tuple of ``ValidationChain`` objects, each bound
to one field of the request body (``body("price")``) or of the URL
parameters (``param("id")``).  Every check of every chain runs, so a request
gets all of its violations back in one response::

    PRICE_RULES = (
        body("price")
        .is_numeric().with_message("invalid value")
        .custom(lambda value: value > 0).with_message("invalid price"),
    )

    class ThingViewSet(GenericViewSet):
        @validate_request(*PRICE_RULES)
        def create(self, request):
            ...

Checks look at the raw value rendered as text: a missing field or ``None``
is ``""`` and booleans are ``"true"`` / ``"false"``.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Sequence

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

BODY = "body"
PARAMS = "params"

_INT_RE = re.compile(r"^[-+]?[0-9]+$")
_NUMERIC_RE = re.compile(r"^[+-]?([0-9]*[.])?[0-9]+$")
_BOOLEAN_VALUES = frozenset({"true", "false", "1", "0"})


def as_text(value: Any) -> str:
    """Render a raw request value as the string the checks operate on."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str
    location: str

    def as_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message, "location": self.location}


@dataclass(frozen=True)
class _Check:
    predicate: Callable[[Any], bool]
    message: Any


class ValidationChain:
    """Ordered checks against a single request field."""

    def __init__(self, location: str, field: str) -> None:
        self.location = location
        self.field = field
        self._checks: List[_Check] = []

    def __repr__(self) -> str:
        return f"<ValidationChain {self.location}.{self.field} checks={len(self._checks)}>"

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    def _add(self, predicate: Callable[[Any], bool], message: str) -> ValidationChain:
        self._checks.append(_Check(predicate, message))
        return self

    def is_int(self) -> ValidationChain:
        return self._add(lambda value: bool(_INT_RE.match(as_text(value))), "Invalid value")

    def is_numeric(self) -> ValidationChain:
        return self._add(lambda value: bool(_NUMERIC_RE.match(as_text(value))), "Invalid value")

    def not_empty(self) -> ValidationChain:
        return self._add(lambda value: as_text(value) != "", "Invalid value")

    def is_boolean(self) -> ValidationChain:
        return self._add(lambda value: as_text(value) in _BOOLEAN_VALUES, "Invalid value")

    def custom(self, predicate: Callable[[Any], bool]) -> ValidationChain:
        return self._add(predicate, "Invalid value")

    def with_message(self, message: Any) -> ValidationChain:
        """Replace the message of the most recently added check."""
        if not self._checks:
            raise ValueError("with_message() must follow a check")
        self._checks[-1] = replace(self._checks[-1], message=message)
        return self

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def run(self, data: Mapping, params: Mapping) -> List[FieldError]:
        source = params if self.location == PARAMS else data
        value = source.get(self.field)
        errors: List[FieldError] = []
        for check in self._checks:
            try:
                passed = check.predicate(value)
            except Exception:
                passed = False
            if not passed:
                errors.append(FieldError(self.field, str(check.message), self.location))
        return errors


def body(field: str) -> ValidationChain:
    return ValidationChain(BODY, field)


def param(field: str) -> ValidationChain:
    return ValidationChain(PARAMS, field)


def run_validation(
    chains: Sequence[ValidationChain], data: Any, params: Mapping
) -> List[FieldError]:
    """Evaluate every chain in declaration order and collect their errors.

    A body that is not a mapping (a JSON list, a bare string) is validated
    as if it were empty.
    """
    if not isinstance(data, Mapping):
        data = {}
    errors: List[FieldError] = []
    for chain in chains:
        errors.extend(chain.run(data, params))
    return errors


def validate_request(*chains: ValidationChain):
    """Gate a viewset action behind ``chains``.

    Any error short-circuits the request with ``400 {"errors": [...]}``;
    the wrapped action only runs when the request is clean.
    """

    def decorator(view_method):
        @functools.wraps(view_method)
        def wrapper(self, request: Request, *args, **kwargs) -> Response:
            errors = run_validation(chains, request.data, kwargs)
            if errors:
                return Response(
                    {"errors": [error.as_dict() for error in errors]},
                    status=status.HTTP_400_BAD_REQUEST,
                )
            return view_method(self, request, *args, **kwargs)

        return wrapper

    return decorator
