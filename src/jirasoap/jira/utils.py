"""Utility functions for JIRA SOAP operations."""

import logging
from collections.abc import Iterable

from ..models import FieldValue
from ..soap import SoapArray
from .constants import FIELD_NAME_CORRECTIONS, UNUPDATABLE_FIELDS

logger = logging.getLogger("jira-soap")


def check_field_values(field_values: Iterable[FieldValue]) -> SoapArray:
    """
    Validate field values before sending them in an update.

    The server silently ignores field names it does not know about, so known
    mistakes are logged. Values are sent unchanged.

    Args:
        field_values: The values passed by the caller

    Returns:
        The values as an array typed for the wire

    Raises:
        TypeError: If an item is not a FieldValue
    """
    checked = SoapArray(item_type=f"beans:{FieldValue.soap_type}")
    for field_value in field_values:
        if not isinstance(field_value, FieldValue):
            raise TypeError(
                f"Expected FieldValue, got {type(field_value).__name__}"
            )
        name = field_value.field_name
        if name in FIELD_NAME_CORRECTIONS:
            logger.warning(
                f"Field '{name}' is ignored by JIRA updates; "
                f"use '{FIELD_NAME_CORRECTIONS[name]}' instead"
            )
        elif name in UNUPDATABLE_FIELDS:
            logger.warning(
                f"Field '{name}' cannot be changed by an update; "
                f"use {UNUPDATABLE_FIELDS[name]}"
            )
        checked.append(field_value)
    return checked
