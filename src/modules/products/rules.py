"""Validation rules for the product routes.

Each tuple is the ordered rule set of one route; see
``modules.core.validation`` for how chains are evaluated.
"""

from __future__ import annotations

from decimal import Decimal

from django.utils.translation import gettext_lazy as _

from modules.core.validation import body, param


def is_positive(value) -> bool:
    """``value > 0`` for numbers and numeric strings.

    Booleans compare as 1 and 0.  A missing value is not positive;
    non-numeric text raises ``InvalidOperation``, which the chain counts as
    a failed check.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return Decimal(str(value).strip() or "0") > 0


ID_RULES = (
    param("id").is_int().with_message(_("ID in not valid")),
)

PRODUCT_BODY_RULES = (
    body("name")
    .not_empty().with_message(_("name required")),
    body("price")
    .is_numeric().with_message(_("invalid value"))
    .not_empty().with_message(_("price required"))
    .custom(is_positive).with_message(_("invalid price")),
)

CREATE_RULES = PRODUCT_BODY_RULES

UPDATE_RULES = (
    *ID_RULES,
    *PRODUCT_BODY_RULES,
    body("availability")
    .is_boolean().with_message(_("invalid availability value")),
)
