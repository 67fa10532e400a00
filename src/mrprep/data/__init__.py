"""Raw data containers and acquisition flags."""

from mrprep.data import enums, acq_filters, flags
from mrprep.data.AcquisitionData import AcquisitionData, Trajectory
from mrprep.data.EncodingLimits import EncodingLimits, Limits
from mrprep.data.enums import AcqFlags
from mrprep.data.RawAcquisitionData import RawAcquisitionData
from mrprep.data.RawParameters import RawParameters
from mrprep.data.RawProfile import ProfileIdx, RawProfile

__all__ = [
    "AcqFlags",
    "AcquisitionData",
    "EncodingLimits",
    "Limits",
    "ProfileIdx",
    "RawAcquisitionData",
    "RawParameters",
    "RawProfile",
    "Trajectory",
    "acq_filters",
    "enums",
    "flags"
]
