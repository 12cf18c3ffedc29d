"""Unit-tagged temperature and wind speed values.

Both types compare on their canonical unit (Celsius, metres per second)
rounded to three decimals, so values that went through different
conversions still compare equal.
"""

from __future__ import annotations

import math
from abc import abstractmethod
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

MPS_TO_KMPH = 3.6
MPS_TO_MPH = 2.236936
MPH_TO_KMPH = 1.609344

# Canonical values are compared at 1/PRECISION resolution
PRECISION = 1000


def _canonical_key(value: float) -> int:
    """Scale to PRECISION and round half away from zero."""
    scaled = value * PRECISION
    return int(math.copysign(math.floor(abs(scaled) + 0.5), scaled))


class TemperatureUnit(str, Enum):
    CELSIUS = "C"
    FAHRENHEIT = "F"


class SpeedUnit(str, Enum):
    MPH = "MPH"
    KMPH = "KMPH"
    MPS = "MPS"


class _Measure(BaseModel):
    """Comparison plumbing shared by the measures.

    Subclasses add a ``unit`` field and implement ``_key``.
    """

    model_config = ConfigDict(frozen=True)

    value: float

    @abstractmethod
    def _key(self) -> int:
        """Canonical value scaled and rounded by _canonical_key."""

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() >= other._key()


class Temperature(_Measure):
    """A temperature reading in Celsius or Fahrenheit."""

    unit: TemperatureUnit = Field(validation_alias=AliasChoices("unit", "type"))

    @classmethod
    def from_celsius(cls, value: float) -> Temperature:
        return cls(value=value, unit=TemperatureUnit.CELSIUS)

    @classmethod
    def from_fahrenheit(cls, value: float) -> Temperature:
        return cls(value=value, unit=TemperatureUnit.FAHRENHEIT)

    @property
    def celsius(self) -> float:
        if self.unit is TemperatureUnit.FAHRENHEIT:
            return (self.value - 32.0) / 1.8
        return self.value

    @property
    def fahrenheit(self) -> float:
        if self.unit is TemperatureUnit.CELSIUS:
            return self.value * 1.8 + 32.0
        return self.value

    def _key(self) -> int:
        return _canonical_key(self.celsius)

    def __repr__(self) -> str:
        return f"Temperature({self.value}{self.unit.value})"


class WindSpeed(_Measure):
    """A wind speed in mph, km/h or m/s."""

    unit: SpeedUnit = Field(validation_alias=AliasChoices("unit", "type"))

    @classmethod
    def from_mps(cls, value: float) -> WindSpeed:
        return cls(value=value, unit=SpeedUnit.MPS)

    @classmethod
    def from_mph(cls, value: float) -> WindSpeed:
        return cls(value=value, unit=SpeedUnit.MPH)

    @classmethod
    def from_kmph(cls, value: float) -> WindSpeed:
        return cls(value=value, unit=SpeedUnit.KMPH)

    @property
    def meters_per_second(self) -> float:
        if self.unit is SpeedUnit.MPH:
            return self.value / MPS_TO_MPH
        if self.unit is SpeedUnit.KMPH:
            return self.value / MPS_TO_KMPH
        return self.value

    @property
    def miles_per_hour(self) -> float:
        if self.unit is SpeedUnit.KMPH:
            return self.value / MPH_TO_KMPH
        if self.unit is SpeedUnit.MPS:
            return self.value * MPS_TO_MPH
        return self.value

    @property
    def kilometers_per_hour(self) -> float:
        if self.unit is SpeedUnit.MPH:
            return self.value * MPH_TO_KMPH
        if self.unit is SpeedUnit.MPS:
            return self.value * MPS_TO_KMPH
        return self.value

    def _key(self) -> int:
        return _canonical_key(self.meters_per_second)

    def __repr__(self) -> str:
        return f"WindSpeed({self.value} {self.unit.value})"
