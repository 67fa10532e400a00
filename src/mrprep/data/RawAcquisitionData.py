"""Raw data as acquired, before conversion for reconstruction."""

import dataclasses
import warnings
from collections.abc import Sequence

import ismrmrd
import ismrmrd.xsd.ismrmrdschema.ismrmrd as ismrmrdschema
import torch
from typing_extensions import Self

from mrprep.data.RawParameters import RawParameters
from mrprep.data.RawProfile import RawProfile, convert_time_stamp_osi2, convert_time_stamp_siemens


@dataclasses.dataclass(slots=True)
class RawAcquisitionData:
    """Ordered profiles of a scan and the scanner parameters.

    The order of `profiles` is the acquisition order. The preprocessing steps modify the
    profiles in place, remove profiles and overwrite indices and flags. A single instance
    should therefore be passed through the preprocessing steps, see
    `mrprep.preprocessing.PreprocessingPipeline`.
    """

    profiles: list[RawProfile]
    """Profiles in acquisition order."""

    params: RawParameters = dataclasses.field(default_factory=RawParameters)
    """Scanner parameters."""

    def __len__(self) -> int:
        """Number of profiles."""
        return len(self.profiles)

    @property
    def slice_positions(self) -> torch.Tensor:
        """Position of each profile along the slice-select axis."""
        return torch.tensor([profile.slice_position for profile in self.profiles], dtype=torch.float64)

    @classmethod
    def from_ismrmrd(
        cls,
        header: ismrmrdschema.ismrmrdHeader,
        acquisitions: Sequence[ismrmrd.Acquisition],
        encoding_number: int = 0,
        convert_time_stamps: bool = False,
    ) -> Self:
        """Create raw data from an ISMRMRD header and acquisitions.

        Parameters
        ----------
        header
            ISMRMRD header
        acquisitions
            ISMRMRD acquisitions in acquisition order
        encoding_number
            as ismrmrdHeader can contain multiple encodings, selects which to consider
        convert_time_stamps
            convert the acquisition time stamps to seconds based on the system vendor.
            If False, the raw scanner time stamps are kept.
        """
        convert_time_stamp = None
        if convert_time_stamps:
            vendor = None
            if header.acquisitionSystemInformation is not None:
                vendor = header.acquisitionSystemInformation.systemVendor
            match vendor.lower() if isinstance(vendor, str) else None:
                case 'osi2':
                    convert_time_stamp = convert_time_stamp_osi2  # 1ms time steps
                case 'siemens':
                    convert_time_stamp = convert_time_stamp_siemens  # 2.5ms time steps
                case None:
                    warnings.warn('No vendor information found. Assuming Siemens time stamp format.', stacklevel=2)
                    convert_time_stamp = convert_time_stamp_siemens
                case _:
                    warnings.warn(
                        f'Unknown vendor {vendor}. Assuming Siemens time stamp format.',
                        stacklevel=2,
                    )
                    convert_time_stamp = convert_time_stamp_siemens

        profiles = [RawProfile.from_ismrmrd_acquisition(acq, convert_time_stamp) for acq in acquisitions]
        return cls(profiles=profiles, params=RawParameters.from_ismrmrd_header(header, encoding_number))
