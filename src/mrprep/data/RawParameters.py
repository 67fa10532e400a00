"""Scanner parameters needed for preprocessing."""

import dataclasses

import ismrmrd.xsd.ismrmrdschema.ismrmrd as ismrmrdschema
from typing_extensions import Self

from mrprep.data.EncodingLimits import EncodingLimits


@dataclasses.dataclass(slots=True)
class RawParameters:
    """Scanner parameters of a raw data set."""

    encoding_limits: EncodingLimits = dataclasses.field(default_factory=EncodingLimits)
    """Encoding limits. `encoding_limits.slice.max` is the highest slice index."""

    te: list[float] = dataclasses.field(default_factory=list)
    """Echo times, in the order of the contrasts, in the units of the header [ms]."""

    recon_size: tuple[int, int] = (1, 1)
    """Reconstruction matrix size `(x, y)`."""

    @property
    def n_slices(self) -> int:
        """Number of slices."""
        return self.encoding_limits.slice.max + 1

    @property
    def n_echoes(self) -> int:
        """Number of echoes, including the navigator stored as an additional echo."""
        return len(self.te) + 1

    @classmethod
    def from_ismrmrd_header(cls, header: ismrmrdschema.ismrmrdHeader, encoding_number: int = 0) -> Self:
        """Read the parameters from an ISMRMRD header.

        Parameters
        ----------
        header
            ISMRMRD header
        encoding_number
            as ismrmrdHeader can contain multiple encodings, selects which to consider
        """
        if not 0 <= encoding_number < len(header.encoding):
            raise ValueError(f'encoding_number must be between 0 and {len(header.encoding)}')
        enc: ismrmrdschema.encodingType = header.encoding[encoding_number]

        parameters: dict = {'encoding_limits': EncodingLimits.from_ismrmrd_encoding_limits_type(enc.encodingLimits)}
        if header.sequenceParameters is not None and header.sequenceParameters.TE:
            parameters['te'] = [float(te) for te in header.sequenceParameters.TE]
        if enc.reconSpace is not None:
            parameters['recon_size'] = (int(enc.reconSpace.matrixSize.x), int(enc.reconSpace.matrixSize.y))
        return cls(**parameters)
