"""Interface to the external image reconstruction."""

from mrprep.reconstruction.Reconstruction import Reconstruction, ReconstructionBackend, ReconstructionParameters
from mrprep.reconstruction.IterativeSenseReconstruction import IterativeSenseReconstruction
from mrprep.reconstruction.DirectReconstruction import DirectReconstruction

__all__ = [
    "DirectReconstruction",
    "IterativeSenseReconstruction",
    "Reconstruction",
    "ReconstructionBackend",
    "ReconstructionParameters"
]
