"""Utility helpers for federql."""

from federql.utils.field_set import camelize, serialize_field_set

__all__ = ["camelize", "serialize_field_set"]
