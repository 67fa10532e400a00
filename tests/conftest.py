"""PyTest fixtures for the mrprep package."""

import ismrmrd
import ismrmrd.xsd.ismrmrdschema.ismrmrd as ismrmrdschema
import numpy as np
import pytest
import torch
from mrprep.data import AcqFlags, AcquisitionData, Trajectory

from tests import RandomGenerator
from tests.helper import phase_stabilized_acquisition


@pytest.fixture(params=({'seed': 0},))
def raw_data(request):
    """Three slices, two echoes, four lines with noise, reference and navigator profiles."""
    return phase_stabilized_acquisition(RandomGenerator(request.param['seed']))


@pytest.fixture(params=({'seed': 0, 'n_contrasts': 2, 'n_slices': 3, 'n_samples': 32, 'n_coils': 4},))
def acq_data(request):
    """Converted data without subsample indices and echo times."""
    generator = RandomGenerator(request.param['seed'])
    n_contrasts, n_slices = request.param['n_contrasts'], request.param['n_slices']
    kdata = [
        [
            generator.complex64_tensor((request.param['n_samples'], request.param['n_coils']))
            for _ in range(n_slices)
        ]
        for _ in range(n_contrasts)
    ]
    return AcquisitionData(
        kdata=kdata,
        traj=[Trajectory() for _ in range(n_contrasts)],
        subsample_indices=[torch.zeros(0, dtype=torch.int64) for _ in range(n_slices)],
        encoding_size=(8, 4),
    )


@pytest.fixture(params=({'seed': 0, 'n_coils': 4, 'n_samples': 16},))
def random_acquisition(request):
    """ISMRMRD acquisition flagged as reversed readout."""
    generator = RandomGenerator(request.param['seed'])
    n_coils, n_samples = request.param['n_coils'], request.param['n_samples']
    data = generator.complex64_tensor((n_coils, n_samples)).numpy()
    trajectory = np.zeros((n_samples, 2), dtype=np.float32)
    header = {
        'flags': AcqFlags.ACQ_IS_REVERSE.value | AcqFlags.ACQ_FIRST_IN_SLICE.value,
        'acquisition_time_stamp': generator.uint32(high=1 << 24),
        'position': generator.float32_tuple(3, low=-50, high=50),
        'read_dir': (1, 0, 0),
        'phase_dir': (0, 1, 0),
        'slice_dir': (0, 0, 1),
        'idx': ismrmrd.EncodingCounters(
            kspace_encode_step_1=generator.uint16(high=64),
            slice=generator.uint16(high=8),
            contrast=generator.uint16(high=4),
            repetition=generator.uint16(high=4),
        ),
    }
    return ismrmrd.Acquisition.from_array(data, trajectory, **header)


@pytest.fixture
def ismrmrd_header() -> ismrmrdschema.ismrmrdHeader:
    """Header with three slices, two echo times and a 64x48 reconstruction matrix."""
    encoding = ismrmrdschema.encodingType(
        trajectory=ismrmrdschema.trajectoryType.CARTESIAN,
        encodedSpace=ismrmrdschema.encodingSpaceType(
            matrixSize=ismrmrdschema.matrixSizeType(x=128, y=48, z=1),
            fieldOfView_mm=ismrmrdschema.fieldOfViewMm(x=256, y=192, z=5),
        ),
        reconSpace=ismrmrdschema.encodingSpaceType(
            matrixSize=ismrmrdschema.matrixSizeType(x=64, y=48, z=1),
            fieldOfView_mm=ismrmrdschema.fieldOfViewMm(x=256, y=192, z=5),
        ),
        encodingLimits=ismrmrdschema.encodingLimitsType(
            kspace_encoding_step_1=ismrmrdschema.limitType(minimum=0, maximum=47, center=24),
            slice=ismrmrdschema.limitType(minimum=0, maximum=2, center=1),
        ),
    )
    return ismrmrdschema.ismrmrdHeader(
        encoding=[encoding],
        sequenceParameters=ismrmrdschema.sequenceParametersType(TE=[2.5, 5.0]),
        acquisitionSystemInformation=ismrmrdschema.acquisitionSystemInformationType(systemVendor='Siemens'),
    )
