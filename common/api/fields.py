"""Serializer fields for loosely typed profile form input."""

import json
import logging
from decimal import Decimal

from rest_framework import serializers

from ..coercion import coerce_flag, normalize_travel_distance

logger = logging.getLogger(__name__)


class FlagField(serializers.Field):
    """
    Boolean flag sent as a native boolean, 0/1, or text ("0"/"1"/"true"/"false").
    Missing or blank means False.
    """

    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        kwargs.setdefault("default", False)
        kwargs.setdefault("allow_null", True)
        super().__init__(**kwargs)

    def validate_empty_values(self, data):
        if data is None:
            return (True, False)
        return super().validate_empty_values(data)

    def to_internal_value(self, data):
        try:
            return coerce_flag(data)
        except ValueError as exc:
            raise serializers.ValidationError(str(exc))

    def to_representation(self, value):
        return bool(value)


class JSONListField(serializers.Field):
    """
    List of strings sent either as a native list (JSON bodies) or as JSON
    text (multipart forms). Missing or blank means an empty list.

    With `lenient=True` undecodable input is logged and read as an empty
    list, and non-string entries are dropped, instead of failing validation.
    """

    def __init__(self, lenient=False, **kwargs):
        self.lenient = lenient
        kwargs.setdefault("required", False)
        kwargs.setdefault("default", list)
        kwargs.setdefault("allow_null", True)
        super().__init__(**kwargs)

    def validate_empty_values(self, data):
        if data is None:
            return (True, [])
        return super().validate_empty_values(data)

    def to_internal_value(self, data):
        try:
            return self._parse(data)
        except serializers.ValidationError as exc:
            if not self.lenient:
                raise
            logger.warning("Ignoring unreadable '%s': %s", self.field_name, exc.detail[0])
            return []

    def _parse(self, data):
        if isinstance(data, str):
            if not data.strip():
                return []
            try:
                data = json.loads(data)
            except ValueError:
                raise serializers.ValidationError("Must be a JSON array of strings.")
        if not isinstance(data, list):
            raise serializers.ValidationError("Must be an array of strings.")
        if any(not isinstance(x, str) for x in data):
            if self.lenient:
                return [x for x in data if isinstance(x, str)]
            raise serializers.ValidationError("All entries must be strings.")
        return data

    def to_representation(self, value):
        return list(value or [])


class BudgetField(serializers.DecimalField):
    """Decimal amount where a missing or blank value means 0."""

    def __init__(self, **kwargs):
        kwargs.setdefault("max_digits", 12)
        kwargs.setdefault("decimal_places", 2)
        kwargs.setdefault("min_value", Decimal("0"))
        kwargs.setdefault("required", False)
        kwargs.setdefault("default", Decimal("0"))
        kwargs.setdefault("allow_null", True)
        super().__init__(**kwargs)

    def validate_empty_values(self, data):
        if data is None or (isinstance(data, str) and not data.strip()):
            return (True, Decimal("0"))
        return super().validate_empty_values(data)


class TravelDistanceField(serializers.Field):
    """Distance in km; unparseable input normalizes to 0 instead of failing."""

    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        kwargs.setdefault("default", 0)
        kwargs.setdefault("allow_null", True)
        super().__init__(**kwargs)

    def validate_empty_values(self, data):
        if data is None:
            return (True, 0)
        return super().validate_empty_values(data)

    def to_internal_value(self, data):
        return normalize_travel_distance(data)

    def to_representation(self, value):
        return int(value or 0)
