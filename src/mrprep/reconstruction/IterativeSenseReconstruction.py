"""Iterative SENSE reconstruction."""

from typing import Any

import torch

from mrprep.data.AcquisitionData import AcquisitionData
from mrprep.preprocessing.noise_covariance import noise_covariance
from mrprep.reconstruction.Reconstruction import Reconstruction, ReconstructionBackend, ReconstructionParameters


class IterativeSenseReconstruction(Reconstruction):
    """Iterative SENSE reconstruction with L2 regularization [PRU2001]_.

    The solver itself is provided by the backend, which is called with a fixed
    configuration, the coil sensitivity maps and, if available, the noise measurement.

    References
    ----------
    .. [PRU2001] Pruessmann K, Weiger M, Boernert P, Boesiger P (2001) Advances in sensitivity encoding with
       arbitrary k-space trajectories. MRM 46(4) https://doi.org/10.1002/mrm.1241
    """

    def __init__(
        self,
        backend: ReconstructionBackend,
        csm: torch.Tensor,
        noise: torch.Tensor | None = None,
        parameters: ReconstructionParameters | None = None,
    ):
        """Initialize IterativeSenseReconstruction.

        Parameters
        ----------
        backend
            external reconstruction
        csm
            coil sensitivity maps with shape `(x, y, slices, coils)`
        noise
            noise samples with shape `(k0, coils)`. If None, no noise decorrelation is done by the backend.
        parameters
            solver configuration. If None, the defaults of `ReconstructionParameters` are used.

        Raises
        ------
        ValueError
            If the sensitivity maps are not 4D or the coils of maps and noise differ.
        """
        super().__init__()
        if csm.ndim != 4:
            raise ValueError(f'Coil sensitivity maps must be 4D, got shape {tuple(csm.shape)}.')
        if noise is not None and noise.shape[-1] != csm.shape[-1]:
            raise ValueError(f'Noise has {noise.shape[-1]} coils, coil sensitivity maps have {csm.shape[-1]}.')
        self.backend = backend
        self.csm = csm
        self.noise = noise
        self.config = parameters if parameters is not None else ReconstructionParameters()

    def backend_parameters(self, acq_data: AcquisitionData) -> dict[str, Any]:
        """Parameters passed to the backend."""
        parameters: dict[str, Any] = {
            'reco': self.config.reco,
            'solver': self.config.solver,
            'regularization': self.config.regularization,
            'lambda': self.config.regularization_weight,
            'iterations': self.config.iterations,
            'recon_size': self.recon_size(acq_data),
            'estimate_profile_center': self.config.estimate_profile_center,
            'sense_maps': self.csm,
        }
        if self.noise is not None:
            parameters['noise_data'] = self.noise
            parameters['noise_covariance'] = noise_covariance(self.noise)
        return parameters

    def forward(self, acq_data: AcquisitionData) -> torch.Tensor:
        """Apply the reconstruction.

        Parameters
        ----------
        acq_data
            annotated acquisition data

        Returns
        -------
            the reconstructed image without singleton dimensions
        """
        return super().forward(acq_data).squeeze()
