"""Test raw profiles based on their flags."""

from mrprep.data.enums import AcqFlags
from mrprep.data.flags import flag_set
from mrprep.data.RawProfile import RawProfile


def is_phase_stabilization_reference_profile(profile: RawProfile) -> bool:
    """Test if a profile is reference data of the phase stabilization.

    Parameters
    ----------
    profile
        raw profile

    Returns
    -------
        True if the `ACQ_IS_PHASE_STABILIZATION_REFERENCE` flag is set
    """
    return flag_set(profile.flags, AcqFlags.ACQ_IS_PHASE_STABILIZATION_REFERENCE)
