"""Fill in missing subsample indices."""

import torch

from mrprep.data.AcquisitionData import AcquisitionData
from mrprep.errors import IndexOutOfRangeError


def adjust_subsample_indices(acq_data: AcquisitionData) -> bool:
    """Set the subsample indices if the conversion left them empty.

    This happens if the data was not acquired in the first repetition. All slices get the
    indices of all samples of the first contrast and slice, i.e. ``0, ..., n-1``.
    Only the first slice is checked, partially filled indices are not repaired.

    Parameters
    ----------
    acq_data
        converted acquisition data, modified in place

    Returns
    -------
        True if the indices were set

    Raises
    ------
    IndexOutOfRangeError
        If there are no subsample indices or no k-space data to take the number of samples from.
    """
    if not acq_data.subsample_indices:
        raise IndexOutOfRangeError('No subsample indices to check', step='adjust_subsample_indices', index=0)
    if acq_data.subsample_indices[0].numel():
        return False
    if not acq_data.kdata or not acq_data.kdata[0]:
        raise IndexOutOfRangeError(
            'No k-space data of the first contrast and slice', step='adjust_subsample_indices', index=0
        )
    n_samples = acq_data.kdata[0][0].shape[0]
    for slice_ in range(len(acq_data.subsample_indices)):
        acq_data.subsample_indices[slice_] = torch.arange(n_samples)
    return True
