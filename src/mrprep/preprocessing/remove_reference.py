"""Remove the reference data of the phase stabilization."""

import warnings
from collections.abc import Sequence

from mrprep.data.acq_filters import is_phase_stabilization_reference_profile
from mrprep.data.RawAcquisitionData import RawAcquisitionData
from mrprep.errors import IndexOutOfRangeError


def reference_block_size(
    raw_data: RawAcquisitionData,
    slices: Sequence[int] | None = None,
    echoes: Sequence[int] | None = None,
) -> int:
    """Calculate the number of reference profiles acquired with the phase stabilization.

    One reference profile is acquired for each slice and echo, including the navigator
    which is stored as an additional echo.

    Parameters
    ----------
    raw_data
        raw data providing the scanner parameters
    slices
        slices that were loaded. None means all slices of the scan.
    echoes
        echoes that were loaded. None means all echoes of the scan. The navigator is
        stored as echo 0, so if 0 is included, one more echo is counted.
    """
    n_slices = raw_data.params.n_slices if slices is None else len(slices)
    if echoes is None:
        n_echoes = raw_data.params.n_echoes
    else:
        n_echoes = len(echoes) + 1 if 0 in echoes else len(echoes)
    return n_slices * n_echoes


def remove_reference(
    raw_data: RawAcquisitionData,
    slices: Sequence[int] | None = None,
    echoes: Sequence[int] | None = None,
) -> int:
    """Remove the reference data of the phase stabilization.

    The reference data is assumed to be the first `slices x echoes` profiles. The
    removal is positional and does not check the profiles, so it is not robust to
    recalls or any other change of the acquisition order. If the profiles carry the
    phase stabilization reference flag and it disagrees with the assumed block,
    a warning is issued.

    Parameters
    ----------
    raw_data
        raw data. The reference profiles are removed in place.
    slices
        slices that were loaded. None means all slices of the scan.
    echoes
        echoes that were loaded. None means all echoes of the scan.

    Returns
    -------
        number of removed profiles

    Raises
    ------
    IndexOutOfRangeError
        If there are fewer profiles than reference profiles.
    """
    n_reference = reference_block_size(raw_data, slices, echoes)
    if n_reference > len(raw_data.profiles):
        raise IndexOutOfRangeError(
            f'Expected {n_reference} reference profiles but only {len(raw_data.profiles)} profiles are left',
            step='remove_reference',
            index=n_reference,
        )

    flagged = [is_phase_stabilization_reference_profile(profile) for profile in raw_data.profiles]
    if any(flagged) and sum(flagged[:n_reference]) != n_reference:
        warnings.warn(
            f'Only {sum(flagged[:n_reference])} of the first {n_reference} profiles are flagged as phase '
            f'stabilization reference ({sum(flagged)} flagged in total). '
            'The first profiles are removed nonetheless.',
            stacklevel=2,
        )

    del raw_data.profiles[:n_reference]
    return n_reference
