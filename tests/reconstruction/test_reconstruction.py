"""Tests of the reconstruction interface."""

from collections.abc import Mapping
from typing import Any

import pytest
import torch
from mrprep.data import AcquisitionData
from mrprep.reconstruction import DirectReconstruction, IterativeSenseReconstruction, ReconstructionParameters

from tests import RandomGenerator


class RecordingBackend:
    """Backend returning an image with singleton dimensions and storing the parameters."""

    def __init__(self):
        self.parameters: Mapping[str, Any] = {}

    def __call__(self, acq_data: AcquisitionData, parameters: Mapping[str, Any]) -> torch.Tensor:
        self.parameters = parameters
        return torch.ones(*parameters['recon_size'], 1, 1, dtype=torch.complex64)


def test_iterative_sense_parameters(acq_data):
    """The backend is called with the fixed configuration and the sensitivity maps."""
    backend = RecordingBackend()
    csm = RandomGenerator(seed=0).complex64_tensor((8, 4, 3, 4))
    image = IterativeSenseReconstruction(backend, csm)(acq_data)
    assert image.shape == (8, 4)
    assert backend.parameters['reco'] == 'multiCoil'
    assert backend.parameters['solver'] == 'cgnr'
    assert backend.parameters['regularization'] == 'L2'
    assert backend.parameters['lambda'] == 1e-2
    assert backend.parameters['iterations'] == 20
    assert backend.parameters['recon_size'] == (8, 4)
    assert backend.parameters['estimate_profile_center']
    assert backend.parameters['sense_maps'] is csm
    assert 'noise_data' not in backend.parameters


def test_iterative_sense_with_noise(acq_data):
    """Noise and its covariance are passed on."""
    backend = RecordingBackend()
    generator = RandomGenerator(seed=0)
    csm = generator.complex64_tensor((8, 4, 3, 4))
    noise = generator.complex64_tensor((64, 4))
    parameters = ReconstructionParameters(iterations=5, regularization_weight=0.1)
    IterativeSenseReconstruction(backend, csm, noise, parameters)(acq_data)
    assert backend.parameters['noise_data'] is noise
    assert backend.parameters['noise_covariance'].shape == (4, 4)
    assert backend.parameters['iterations'] == 5
    assert backend.parameters['lambda'] == 0.1


def test_iterative_sense_invalid_csm():
    """Sensitivity maps are (x, y, slices, coils)."""
    with pytest.raises(ValueError, match='4D'):
        IterativeSenseReconstruction(RecordingBackend(), torch.zeros(8, 4, 4, dtype=torch.complex64))


def test_iterative_sense_coil_mismatch():
    """Noise and maps need the same coils."""
    with pytest.raises(ValueError, match='coils'):
        IterativeSenseReconstruction(
            RecordingBackend(),
            torch.zeros(8, 4, 1, 4, dtype=torch.complex64),
            torch.zeros(16, 2, dtype=torch.complex64),
        )


def test_direct_reconstruction(acq_data):
    """Direct reconstruction only passes the reconstruction size and keeps the image shape."""
    backend = RecordingBackend()
    image = DirectReconstruction(backend)(acq_data)
    assert image.shape == (8, 4, 1, 1)
    assert backend.parameters == {'reco': 'direct', 'recon_size': (8, 4)}


def test_recon_size_too_short(acq_data):
    """The in-plane size needs two entries."""
    acq_data.encoding_size = (8,)
    with pytest.raises(ValueError, match='two entries'):
        DirectReconstruction(RecordingBackend())(acq_data)
