"""Direct reconstruction."""

from typing import Any

from mrprep.data.AcquisitionData import AcquisitionData
from mrprep.reconstruction.Reconstruction import Reconstruction, ReconstructionBackend


class DirectReconstruction(Reconstruction):
    """Direct reconstruction without coil sensitivity maps or regularization."""

    def __init__(self, backend: ReconstructionBackend):
        """Initialize DirectReconstruction.

        Parameters
        ----------
        backend
            external reconstruction
        """
        super().__init__()
        self.backend = backend

    def backend_parameters(self, acq_data: AcquisitionData) -> dict[str, Any]:
        """Parameters passed to the backend."""
        return {'reco': 'direct', 'recon_size': self.recon_size(acq_data)}
