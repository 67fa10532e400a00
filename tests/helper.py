"""Helper/Utilities for test functions."""

from collections.abc import Sequence

import torch
from mrprep.data import AcqFlags, EncodingLimits, Limits, ProfileIdx, RawAcquisitionData, RawParameters, RawProfile

from tests import RandomGenerator


def random_profile(
    generator: RandomGenerator,
    *,
    z: float = 0.0,
    flags: AcqFlags | int = AcqFlags.ACQ_NO_FLAG,
    k1: int = 0,
    slice_: int = 0,
    contrast: int = 0,
    time_stamp: float = 0.0,
    n_k0: int = 8,
    n_coils: int = 4,
) -> RawProfile:
    """Create a profile with random data at position (0, 0, z)."""
    return RawProfile(
        data=generator.complex64_tensor((n_k0, n_coils), low=0.1),
        position=torch.tensor([0.0, 0.0, z]),
        flags=flags.value if isinstance(flags, AcqFlags) else flags,
        idx=ProfileIdx(k1=k1, slice=slice_, contrast=contrast),
        acquisition_time_stamp=time_stamp,
    )


def raw_parameters(n_slices: int, te: Sequence[float], recon_size: tuple[int, int]) -> RawParameters:
    """Scanner parameters with slice limits for `n_slices` slices."""
    return RawParameters(
        encoding_limits=EncodingLimits(slice=Limits(0, n_slices - 1, n_slices // 2)),
        te=list(te),
        recon_size=recon_size,
    )


def phase_stabilized_acquisition(
    generator: RandomGenerator,
    slice_positions: Sequence[float] = (-5.0, 10.0, 2.5),
    te: Sequence[float] = (2.0, 4.0),
    n_lines: int = 4,
    n_k0: int = 8,
    n_coils: int = 4,
) -> RawAcquisitionData:
    """Multi-slice, multi-echo bipolar acquisition with phase stabilization and navigators.

    Slices are acquired in the order of `slice_positions`, with the scanner slice index
    following this acquisition order. The acquisition consists of

    - one noise measurement at the first slice position
    - one phase stabilization reference profile per echo and slice, the navigator counting as echo
    - for each line and slice: the first echo, its navigator (also contrast 0) and the
      remaining echoes. Echoes with odd contrast are acquired on the reversed gradient lobe.

    Navigators are flagged with `ACQ_IS_NAVIGATION_DATA`, which the preprocessing does not use,
    so tests can find them.
    """
    n_slices = len(slice_positions)
    time_stamp = 0.0
    profiles = []

    def add(**kwargs) -> None:
        nonlocal time_stamp
        profiles.append(
            random_profile(generator, time_stamp=time_stamp, n_k0=n_k0, n_coils=n_coils, **kwargs),
        )
        time_stamp += 1.0

    add(z=slice_positions[0], flags=AcqFlags.ACQ_IS_NOISE_MEASUREMENT)
    for echo in range(len(te) + 1):
        for slice_, z in enumerate(slice_positions):
            add(z=z, flags=AcqFlags.ACQ_IS_PHASE_STABILIZATION_REFERENCE, slice_=slice_, contrast=echo)
    for line in range(n_lines):
        for slice_, z in enumerate(slice_positions):
            add(z=z, k1=line, slice_=slice_, contrast=0)
            add(z=z, k1=line, slice_=slice_, contrast=0, flags=AcqFlags.ACQ_IS_NAVIGATION_DATA)
            for contrast in range(1, len(te)):
                flags = AcqFlags.ACQ_IS_REVERSE if contrast % 2 else AcqFlags.ACQ_NO_FLAG
                add(z=z, k1=line, slice_=slice_, contrast=contrast, flags=flags)

    return RawAcquisitionData(profiles=profiles, params=raw_parameters(n_slices, te, (n_k0, n_lines)))
