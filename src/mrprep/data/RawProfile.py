"""A single readout of raw k-space data."""

import dataclasses
from collections.abc import Callable

import ismrmrd
import numpy as np
import torch
from einops import rearrange
from typing_extensions import Self


def convert_time_stamp_siemens(timestamp: int) -> float:
    """Convert Siemens time stamp to seconds."""
    return timestamp * 2.5e-3


def convert_time_stamp_osi2(timestamp: int) -> float:
    """Convert OSI2 time stamp to seconds."""
    return timestamp * 1e-3


@dataclasses.dataclass(slots=True)
class ProfileIdx:
    """Encoding indices of a readout.

    All indices are zero-based, as stored by the scanner.
    """

    k1: int = 0
    """First phase encoding, i.e. the k-space line."""

    k2: int = 0
    """Second phase encoding."""

    slice: int = 0
    """Slice number. Overwritten with the spatial order by `order_slices`."""

    contrast: int = 0
    """Echo number in multi-echo. Image and navigator data of the first echo share contrast 0."""

    repetition: int = 0
    """Counter in repeated/dynamic acquisitions."""

    average: int = 0
    """Signal average."""


@dataclasses.dataclass(slots=True)
class RawProfile:
    """One readout with its header information."""

    data: torch.Tensor
    """Complex k-space samples. Shape `(k0, coils)`"""

    position: torch.Tensor = dataclasses.field(default_factory=lambda: torch.zeros(3))
    """Center of the excited volume `(x, y, z)`. The last entry is along the slice-select axis."""

    flags: int = 0
    """Packed 31 bit acquisition flags, see `mrprep.data.enums.AcqFlags`."""

    idx: ProfileIdx = dataclasses.field(default_factory=ProfileIdx)
    """Encoding indices."""

    acquisition_time_stamp: float = 0.0
    """Acquisition time stamp."""

    def __post_init__(self) -> None:
        """Check the shapes of data and position."""
        if self.data.ndim != 2:
            raise ValueError(f'Profile data must have shape (k0, coils), got {tuple(self.data.shape)}.')
        if self.position.shape != (3,):
            raise ValueError(f'Position must have three entries, got shape {tuple(self.position.shape)}.')

    @property
    def slice_position(self) -> float:
        """Position along the slice-select axis."""
        return float(self.position[-1])

    @classmethod
    def from_ismrmrd_acquisition(
        cls,
        acquisition: ismrmrd.Acquisition,
        convert_time_stamp: Callable[[int], float] | None = None,
    ) -> Self:
        """Create a profile from an ISMRMRD acquisition.

        Parameters
        ----------
        acquisition
            ISMRMRD acquisition, with data of shape `(coils, k0)`
        convert_time_stamp
            function converting the raw time stamp, e.g. `convert_time_stamp_siemens`.
            If None, the raw scanner value is kept.
        """
        data = torch.as_tensor(acquisition.data, dtype=torch.complex64)
        idx = ProfileIdx(
            k1=int(acquisition.idx.kspace_encode_step_1),
            k2=int(acquisition.idx.kspace_encode_step_2),
            slice=int(acquisition.idx.slice),
            contrast=int(acquisition.idx.contrast),
            repetition=int(acquisition.idx.repetition),
            average=int(acquisition.idx.average),
        )
        time_stamp = int(acquisition.acquisition_time_stamp)
        return cls(
            data=rearrange(data, 'coils k0 -> k0 coils').contiguous(),
            position=torch.as_tensor(np.asarray(tuple(acquisition.position), dtype=np.float32)),
            flags=int(acquisition.flags),
            idx=idx,
            acquisition_time_stamp=float(time_stamp if convert_time_stamp is None else convert_time_stamp(time_stamp)),
        )
