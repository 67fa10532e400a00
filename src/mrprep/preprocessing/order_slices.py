"""Spatial ordering of slices."""

import torch

from mrprep.data.RawAcquisitionData import RawAcquisitionData


def order_slices(raw_data: RawAcquisitionData) -> torch.Tensor:
    """Label the slices of all profiles by their spatial position.

    The distinct positions along the slice-select axis are ranked in ascending order and
    each profile gets the zero-based rank of its position as slice index. Profiles at the
    same position, e.g. repeated excitations of a slice, get the same index.

    This has to run before any step which uses the slice index.

    Parameters
    ----------
    raw_data
        raw data, modified in place

    Returns
    -------
        the distinct slice positions in ascending order, i.e. the position of each slice index
    """
    slice_positions, slice_labels = torch.unique(raw_data.slice_positions, sorted=True, return_inverse=True)
    for profile, label in zip(raw_data.profiles, slice_labels.tolist(), strict=True):
        profile.idx.slice = label
    return slice_positions
