"""Preprocessing of raw data before conversion and reconstruction."""

from mrprep.preprocessing.order_slices import order_slices
from mrprep.preprocessing.extract_noise_data import extract_noise_data
from mrprep.preprocessing.reverse_bipolar import reverse_bipolar
from mrprep.preprocessing.remove_reference import reference_block_size, remove_reference
from mrprep.preprocessing.extract_navigator import extract_navigator
from mrprep.preprocessing.copy_te import copy_te
from mrprep.preprocessing.adjust_subsample_indices import adjust_subsample_indices
from mrprep.preprocessing.noise_covariance import noise_covariance
from mrprep.preprocessing.PreprocessingPipeline import (
    PipelineStage,
    PreprocessingPipeline,
    PreprocessingResult,
    default_stages,
)

__all__ = [
    "PipelineStage",
    "PreprocessingPipeline",
    "PreprocessingResult",
    "adjust_subsample_indices",
    "copy_te",
    "default_stages",
    "extract_navigator",
    "extract_noise_data",
    "noise_covariance",
    "order_slices",
    "reference_block_size",
    "remove_reference",
    "reverse_bipolar"
]
