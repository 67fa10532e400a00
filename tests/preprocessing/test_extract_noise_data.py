"""Tests of the noise extraction."""

import pytest
import torch
from mrprep.data import AcqFlags, RawAcquisitionData
from mrprep.errors import MalformedFlagsError, MissingNoiseProfileError
from mrprep.preprocessing import extract_noise_data

from tests import RandomGenerator
from tests.helper import random_profile


def test_extract_noise_data():
    """The noise profile is returned and removed."""
    generator = RandomGenerator(seed=0)
    profiles = [random_profile(generator) for _ in range(5)]
    profiles.insert(2, random_profile(generator, flags=AcqFlags.ACQ_IS_NOISE_MEASUREMENT, n_k0=64))
    noise_data = profiles[2].data.clone()
    others = [profile for i, profile in enumerate(profiles) if i != 2]
    raw_data = RawAcquisitionData(profiles=profiles)

    noise = extract_noise_data(raw_data)

    torch.testing.assert_close(noise, noise_data)
    assert len(raw_data) == 5
    assert all(a is b for a, b in zip(raw_data.profiles, others, strict=True))


def test_extract_noise_data_only_first():
    """Only the first noise profile is extracted."""
    generator = RandomGenerator(seed=0)
    profiles = [
        random_profile(generator),
        random_profile(generator, flags=AcqFlags.ACQ_IS_NOISE_MEASUREMENT | AcqFlags.ACQ_FIRST_IN_SLICE),
        random_profile(generator, flags=AcqFlags.ACQ_IS_NOISE_MEASUREMENT),
    ]
    first_noise = profiles[1].data
    raw_data = RawAcquisitionData(profiles=profiles)
    assert extract_noise_data(raw_data) is first_noise
    assert len(raw_data) == 2
    assert raw_data.profiles[1].flags == AcqFlags.ACQ_IS_NOISE_MEASUREMENT.value


def test_extract_noise_data_missing():
    """Without noise profile an error is raised and nothing is removed."""
    generator = RandomGenerator(seed=0)
    raw_data = RawAcquisitionData(profiles=[random_profile(generator, flags=AcqFlags.ACQ_IS_REVERSE)])
    with pytest.raises(MissingNoiseProfileError, match='extract_noise_data'):
        extract_noise_data(raw_data)
    assert len(raw_data) == 1


def test_extract_noise_data_user_flag_above_int64():
    """A noise profile with ISMRMRD user flag 64 set is reported as malformed."""
    generator = RandomGenerator(seed=0)
    profiles = [random_profile(generator, flags=2**63 + AcqFlags.ACQ_IS_NOISE_MEASUREMENT.value)]
    raw_data = RawAcquisitionData(profiles=profiles)
    with pytest.raises(MalformedFlagsError) as exc_info:
        extract_noise_data(raw_data)
    assert exc_info.value.step == 'extract_noise_data'
    assert exc_info.value.index == 0
    assert len(raw_data) == 1
