"""Enumerations for vehicletax."""

from enum import StrEnum


class TaxDimension(StrEnum):
    POWER = "POWER"
    WEIGHT = "WEIGHT"
