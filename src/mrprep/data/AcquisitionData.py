"""Acquisition data after conversion from raw data."""

import dataclasses

import torch


@dataclasses.dataclass(slots=True)
class Trajectory:
    """Trajectory information of one contrast."""

    name: str = 'cartesian'
    """Trajectory type."""

    te: float = 0.0
    """Echo time of the contrast [ms]."""


@dataclasses.dataclass(slots=True)
class AcquisitionData:
    """Converted acquisition data, as passed to the reconstruction.

    The conversion from `RawAcquisitionData` happens outside of this package. The
    preprocessing only annotates this structure, see `mrprep.preprocessing.copy_te`
    and `mrprep.preprocessing.adjust_subsample_indices`.
    """

    kdata: list[list[torch.Tensor]]
    """K-space data indexed as `kdata[contrast][slice]`, each of shape `(samples, coils)`."""

    traj: list[Trajectory]
    """Trajectory of each contrast."""

    subsample_indices: list[torch.Tensor]
    """Indices of the acquired k-space samples for each slice. Empty if not set by the conversion."""

    encoding_size: tuple[int, ...]
    """Size of the encoding matrix."""

    def __post_init__(self) -> None:
        """Check that all contrasts have the same number of slices."""
        n_slices = {len(slices) for slices in self.kdata}
        if len(n_slices) > 1:
            raise ValueError(f'All contrasts need the same number of slices, got {sorted(n_slices)}.')

    @property
    def n_contrasts(self) -> int:
        """Number of contrasts."""
        return len(self.kdata)

    @property
    def n_slices(self) -> int:
        """Number of slices."""
        return len(self.kdata[0]) if self.kdata else 0
