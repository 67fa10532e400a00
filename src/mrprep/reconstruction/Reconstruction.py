"""Reconstruction module."""

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol

import torch

from mrprep.data.AcquisitionData import AcquisitionData


class ReconstructionBackend(Protocol):
    """External reconstruction, e.g. an iterative solver library.

    Called with the annotated acquisition data and a parameter dictionary, returns the image.
    """

    def __call__(self, acq_data: AcquisitionData, parameters: Mapping[str, Any]) -> torch.Tensor:
        """Reconstruct an image."""
        ...


@dataclasses.dataclass(frozen=True)
class ReconstructionParameters:
    """Fixed configuration of the iterative reconstruction."""

    reco: str = 'multiCoil'
    """Reconstruction type."""

    solver: str = 'cgnr'
    """Name of the iterative solver."""

    regularization: str = 'L2'
    """Type of regularization."""

    regularization_weight: float = 1e-2
    """Weight of the regularization."""

    iterations: int = 20
    """Number of iterations."""

    estimate_profile_center: bool = True
    """Estimate the k-space center of each profile."""


class Reconstruction(torch.nn.Module, ABC):
    """A reconstruction handed to an external backend."""

    backend: ReconstructionBackend
    """External reconstruction called with the parameters."""

    @abstractmethod
    def backend_parameters(self, acq_data: AcquisitionData) -> dict[str, Any]:
        """Parameters passed to the backend."""

    def forward(self, acq_data: AcquisitionData) -> torch.Tensor:
        """Apply the reconstruction.

        Parameters
        ----------
        acq_data
            annotated acquisition data

        Returns
        -------
            the image as returned by the backend
        """
        image = self.backend(acq_data, self.backend_parameters(acq_data))
        return torch.as_tensor(image)

    # Required for type hinting
    def __call__(self, acq_data: AcquisitionData) -> torch.Tensor:
        """Apply the reconstruction."""
        return super().__call__(acq_data)

    @staticmethod
    def recon_size(acq_data: AcquisitionData) -> tuple[int, int]:
        """In-plane reconstruction size from the encoding size."""
        if len(acq_data.encoding_size) < 2:
            raise ValueError(f'Encoding size needs at least two entries, got {acq_data.encoding_size}.')
        return (acq_data.encoding_size[0], acq_data.encoding_size[1])
