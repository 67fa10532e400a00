"""Extract navigator readouts interleaved with the first echo."""

import warnings
from collections.abc import Sequence

import torch

from mrprep.data.RawAcquisitionData import RawAcquisitionData
from mrprep.errors import IndexOutOfRangeError, ShapeMismatchError


def extract_navigator(
    raw_data: RawAcquisitionData,
    slices: Sequence[int] | None = None,
) -> tuple[torch.Tensor, torch.Tensor]:
    """Extract the navigator profiles from the raw data.

    Navigators are stored with the same indices as the image data of the first echo, i.e.
    with contrast 0. Among the profiles with contrast 0, the first, third, ... profile is
    image data and the second, fourth, ... profile is the navigator acquired directly after it.
    If the number of contrast 0 profiles is odd, the last one is ignored.

    The navigator lines are placed by their own phase encoding index `k1` and slice index,
    so `order_slices` has to run before. Lines without any navigator are removed from the
    output.

    Parameters
    ----------
    raw_data
        raw data without noise and reference profiles. Not modified.
    slices
        slices that were loaded. None means all slices of the scan.

    Returns
    -------
        navigator data with shape `(k0, coils, lines, slices)` and the acquisition time stamp of
        each navigator with shape `(lines, slices)`

    Raises
    ------
    IndexOutOfRangeError
        If there is no profile with contrast 0 or if a navigator line or slice index exceeds
        the reconstruction matrix or number of slices.
    ShapeMismatchError
        If the navigator profiles differ in shape.
    """
    n_slices = raw_data.params.n_slices if slices is None else len(slices)
    n_lines = raw_data.params.recon_size[1]

    # keep only the data saved in the first echo, this includes the navigator
    first_echo = [profile for profile in raw_data.profiles if profile.idx.contrast == 0]
    if not first_echo:
        raise IndexOutOfRangeError('No profiles with contrast 0 found', step='extract_navigator')
    if len(first_echo) % 2:
        warnings.warn(
            f'Odd number ({len(first_echo)}) of profiles with contrast 0. The last one is ignored.',
            stacklevel=2,
        )

    n_k0, n_coils = first_echo[0].data.shape
    nav = torch.zeros(n_k0, n_coils, n_lines, n_slices, dtype=torch.complex64)
    nav_time = torch.zeros(n_lines, n_slices, dtype=torch.float64)

    # image data and navigator alternate
    navigators = first_echo[1::2]
    for navigator in navigators:
        line, slice_ = navigator.idx.k1, navigator.idx.slice
        if not 0 <= line < n_lines:
            raise IndexOutOfRangeError(
                f'Navigator line outside of reconstruction matrix with {n_lines} lines',
                step='extract_navigator',
                index=line,
            )
        if not 0 <= slice_ < n_slices:
            raise IndexOutOfRangeError(
                f'Navigator slice outside of the {n_slices} slices', step='extract_navigator', index=slice_
            )
        if navigator.data.shape != (n_k0, n_coils):
            raise ShapeMismatchError(
                f'Navigator data has shape {tuple(navigator.data.shape)}, expected {(n_k0, n_coils)}',
                step='extract_navigator',
                index=line,
            )
        nav[:, :, line, slice_] = navigator.data
        nav_time[line, slice_] = navigator.acquisition_time_stamp

    # remove the lines without navigator
    lines = torch.unique(torch.tensor([navigator.idx.k1 for navigator in navigators], dtype=torch.int64))
    return nav[:, :, lines], nav_time[lines]
