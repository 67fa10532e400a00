"""Acquisition enums."""

import enum

N_FLAG_BITS = 31
"""Number of bits in the acquisition flag field."""


class AcqFlags(enum.Flag):
    """Acquisition flags.

    Only the flags fitting into the 31 bit flag field are listed.

    NOTE: values in enum ISMRMRD_AcquisitionFlags start at 1 and not 0, but
    1 << (val-1) is used in 'ismrmrd_is_flag_set' function to calc bitmask value [ISMb]_.
    The flag with ISMRMRD number n is therefore found at the zero-based bit n-1,
    e.g. ACQ_IS_NOISE_MEASUREMENT (19) at bit 18 and ACQ_IS_REVERSE (22) at bit 21.

    References
    ----------
    .. [ISMb] ISMRMRD https://github.com/ismrmrd/ismrmrd/blob/master/include/ismrmrd/ismrmrd.h
    """

    ACQ_NO_FLAG = 0
    ACQ_FIRST_IN_ENCODE_STEP1 = enum.auto()
    ACQ_LAST_IN_ENCODE_STEP1 = enum.auto()
    ACQ_FIRST_IN_ENCODE_STEP2 = enum.auto()
    ACQ_LAST_IN_ENCODE_STEP2 = enum.auto()
    ACQ_FIRST_IN_AVERAGE = enum.auto()
    ACQ_LAST_IN_AVERAGE = enum.auto()
    ACQ_FIRST_IN_SLICE = enum.auto()
    ACQ_LAST_IN_SLICE = enum.auto()
    ACQ_FIRST_IN_CONTRAST = enum.auto()
    ACQ_LAST_IN_CONTRAST = enum.auto()
    ACQ_FIRST_IN_PHASE = enum.auto()
    ACQ_LAST_IN_PHASE = enum.auto()
    ACQ_FIRST_IN_REPETITION = enum.auto()
    ACQ_LAST_IN_REPETITION = enum.auto()
    ACQ_FIRST_IN_SET = enum.auto()
    ACQ_LAST_IN_SET = enum.auto()
    ACQ_FIRST_IN_SEGMENT = enum.auto()
    ACQ_LAST_IN_SEGMENT = enum.auto()
    ACQ_IS_NOISE_MEASUREMENT = enum.auto()
    ACQ_IS_PARALLEL_CALIBRATION = enum.auto()
    ACQ_IS_PARALLEL_CALIBRATION_AND_IMAGING = enum.auto()
    ACQ_IS_REVERSE = enum.auto()
    ACQ_IS_NAVIGATION_DATA = enum.auto()
    ACQ_IS_PHASECORR_DATA = enum.auto()
    ACQ_LAST_IN_MEASUREMENT = enum.auto()
    ACQ_IS_HPFEEDBACK_DATA = enum.auto()
    ACQ_IS_DUMMYSCAN_DATA = enum.auto()
    ACQ_IS_RTFEEDBACK_DATA = enum.auto()
    ACQ_IS_SURFACECOILCORRECTIONSCAN_DATA = enum.auto()
    ACQ_IS_PHASE_STABILIZATION_REFERENCE = enum.auto()
    ACQ_IS_PHASE_STABILIZATION = enum.auto()

    @property
    def bit(self) -> int:
        """Zero-based bit position of a single flag."""
        if self.value == 0 or self.value & (self.value - 1):
            raise ValueError(f'{self} is not a single flag.')
        return self.value.bit_length() - 1
