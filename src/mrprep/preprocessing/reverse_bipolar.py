"""Correct readouts of bipolar acquisitions."""

import torch

from mrprep.data.enums import AcqFlags
from mrprep.data.flags import clear_flag, extract_flags
from mrprep.data.RawAcquisitionData import RawAcquisitionData


def reverse_bipolar(raw_data: RawAcquisitionData, flags: torch.Tensor | None = None) -> int:
    """Flip the readout of all profiles acquired on the reversed gradient lobe.

    The samples of each profile with the `ACQ_IS_REVERSE` flag are reversed along the
    readout and the flag is cleared, so running this again does not flip them back.

    Parameters
    ----------
    raw_data
        raw data, modified in place
    flags
        decoded flags of the profiles, see `mrprep.data.flags.extract_flags`. If None, the flags are decoded.

    Returns
    -------
        number of reversed profiles

    Raises
    ------
    ShapeMismatchError
        If `flags` does not have one row per profile.
    """
    flags = extract_flags(raw_data, step='reverse_bipolar', decoded=flags)
    reversed_mask = flags[:, AcqFlags.ACQ_IS_REVERSE.bit].tolist()
    for profile, is_reversed in zip(raw_data.profiles, reversed_mask, strict=True):
        if is_reversed:
            profile.data.copy_(profile.data.flip(0))
            profile.flags = clear_flag(profile.flags, AcqFlags.ACQ_IS_REVERSE)
    return sum(reversed_mask)
