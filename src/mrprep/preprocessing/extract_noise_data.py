"""Separate the noise measurement from the raw data."""

import torch

from mrprep.data.enums import AcqFlags
from mrprep.data.flags import extract_flags
from mrprep.data.RawAcquisitionData import RawAcquisitionData
from mrprep.errors import MissingNoiseProfileError


def extract_noise_data(raw_data: RawAcquisitionData, flags: torch.Tensor | None = None) -> torch.Tensor:
    """Remove the noise measurement from the raw data and return it.

    The first profile with the noise measurement flag is the noise measurement.
    By acquisition convention it is the only one, with slice, contrast and repetition 0.
    This is not checked.

    Parameters
    ----------
    raw_data
        raw data. The noise profile is removed in place.
    flags
        decoded flags of the profiles, see `mrprep.data.flags.extract_flags`. If None, the flags are decoded.

    Returns
    -------
        noise samples with shape `(k0, coils)`

    Raises
    ------
    MissingNoiseProfileError
        If no profile has the noise measurement flag.
    ShapeMismatchError
        If `flags` does not have one row per profile.
    """
    flags = extract_flags(raw_data, step='extract_noise_data', decoded=flags)
    noise_idx = torch.nonzero(flags[:, AcqFlags.ACQ_IS_NOISE_MEASUREMENT.bit]).flatten()
    if len(noise_idx) == 0:
        raise MissingNoiseProfileError(
            f'None of the {len(raw_data.profiles)} profiles is a noise measurement',
            step='extract_noise_data',
        )
    noise_profile = raw_data.profiles.pop(int(noise_idx[0]))
    return noise_profile.data
