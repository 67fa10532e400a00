"""Encoding limits dataclass."""

import dataclasses
from dataclasses import dataclass

from ismrmrd.xsd.ismrmrdschema.ismrmrd import encodingLimitsType, limitType
from typing_extensions import Self


@dataclass(slots=True)
class Limits:
    """Limits dataclass with min, max, and center attributes."""

    min: int = 0
    """Lower boundary."""

    max: int = 0
    """Upper boundary."""

    center: int = 0
    """Center."""

    @classmethod
    def from_ismrmrd(cls, limit_type: limitType | None) -> Self:
        """Create Limits from ismrmrd.limitType."""
        if limit_type is None:
            return cls()
        return cls(limit_type.minimum, limit_type.maximum, limit_type.center)


@dataclass(slots=True)
class EncodingLimits:
    """Encoding limits of the labels used for preprocessing [INA2016]_.

    References
    ----------
    .. [INA2016] Inati S, Hansen M (2016) ISMRM Raw data format: A proposed standard for MRI raw datasets. MRM 77(1)
        https://doi.org/10.1002/mrm.26089
    """

    slice: Limits = dataclasses.field(default_factory=Limits)
    """Slice number (multi-slice 2D)."""

    @classmethod
    def from_ismrmrd_encoding_limits_type(cls, encoding_limits: encodingLimitsType | None) -> Self:
        """Generate EncodingLimits from ismrmrd.encodingLimitsType."""
        if encoding_limits is None:
            return cls()
        return cls(
            slice=Limits.from_ismrmrd(encoding_limits.slice),
        )
