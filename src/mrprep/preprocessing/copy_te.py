"""Copy echo times into converted acquisition data."""

from mrprep.data.AcquisitionData import AcquisitionData
from mrprep.data.RawAcquisitionData import RawAcquisitionData
from mrprep.errors import IndexOutOfRangeError


def copy_te(raw_data: RawAcquisitionData, acq_data: AcquisitionData) -> None:
    """Copy the echo times of the raw data to the trajectory of each contrast.

    Parameters
    ----------
    raw_data
        raw data providing the echo times
    acq_data
        converted acquisition data, modified in place

    Raises
    ------
    IndexOutOfRangeError
        If there are fewer echo times or trajectories than contrasts.
    """
    for contrast in range(acq_data.n_contrasts):
        if contrast >= len(raw_data.params.te):
            raise IndexOutOfRangeError(
                f'{len(raw_data.params.te)} echo times for {acq_data.n_contrasts} contrasts',
                step='copy_te',
                index=contrast,
            )
        if contrast >= len(acq_data.traj):
            raise IndexOutOfRangeError(
                f'{len(acq_data.traj)} trajectories for {acq_data.n_contrasts} contrasts',
                step='copy_te',
                index=contrast,
            )
        acq_data.traj[contrast].te = raw_data.params.te[contrast]
