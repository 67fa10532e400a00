"""Preprocessing of raw data as a sequence of stages with a fixed order."""

import dataclasses
from collections.abc import Callable, Sequence
from functools import partial
from typing import Any

import torch

from mrprep.data.AcquisitionData import AcquisitionData
from mrprep.data.RawAcquisitionData import RawAcquisitionData
from mrprep.errors import PipelineOrderError
from mrprep.preprocessing.adjust_subsample_indices import adjust_subsample_indices
from mrprep.preprocessing.copy_te import copy_te
from mrprep.preprocessing.extract_navigator import extract_navigator
from mrprep.preprocessing.extract_noise_data import extract_noise_data
from mrprep.preprocessing.order_slices import order_slices
from mrprep.preprocessing.remove_reference import remove_reference
from mrprep.preprocessing.reverse_bipolar import reverse_bipolar


@dataclasses.dataclass(frozen=True)
class PipelineStage:
    """A named preprocessing step and the stages that have to run before it."""

    name: str
    """Name of the stage."""

    function: Callable[[RawAcquisitionData], Any]
    """Step applied to the raw data. The return value is stored as output of the stage."""

    requires: tuple[str, ...] = ()
    """Names of the stages that have to run before."""


@dataclasses.dataclass(slots=True)
class PreprocessingResult:
    """Data separated from the raw data during preprocessing."""

    noise: torch.Tensor | None
    """Noise samples. Shape `(k0, coils)`"""

    navigator: torch.Tensor | None
    """Navigator data. Shape `(k0, coils, lines, slices)`"""

    navigator_time: torch.Tensor | None
    """Acquisition time stamp of each navigator. Shape `(lines, slices)`"""


def default_stages(slices: Sequence[int] | None = None, echoes: Sequence[int] | None = None) -> list[PipelineStage]:
    """Stages for data acquired with phase stabilization and navigators.

    Parameters
    ----------
    slices
        slices that were loaded. None means all slices of the scan.
    echoes
        echoes that were loaded. None means all echoes of the scan.
    """
    return [
        PipelineStage('order_slices', order_slices),
        PipelineStage('extract_noise', extract_noise_data),
        PipelineStage('reverse_bipolar', reverse_bipolar),
        PipelineStage(
            'remove_reference',
            partial(remove_reference, slices=slices, echoes=echoes),
            requires=('order_slices', 'extract_noise'),
        ),
        PipelineStage(
            'extract_navigator',
            partial(extract_navigator, slices=slices),
            requires=('order_slices', 'reverse_bipolar', 'remove_reference'),
        ),
    ]


class PreprocessingPipeline:
    """Preprocessing of a single raw data set.

    The stages modify the raw data in place and depend on each other, e.g. the reference
    removal counts profiles after the noise measurement was removed. The pipeline owns the
    raw data, runs each stage at most once and only after the stages it requires.

    Examples
    --------
    Run all stages, then annotate the data converted outside of this package:

    >>> pipeline = PreprocessingPipeline(raw_data)
    >>> result = pipeline.run()
    >>> acq_data = pipeline.annotate(convert(pipeline.raw_data))
    """

    def __init__(
        self,
        raw_data: RawAcquisitionData,
        stages: Sequence[PipelineStage] | None = None,
        slices: Sequence[int] | None = None,
        echoes: Sequence[int] | None = None,
    ):
        """Initialize the pipeline.

        Parameters
        ----------
        raw_data
            raw data to preprocess, modified in place
        stages
            stages in the order they are run. If None, `default_stages` is used.
        slices
            slices that were loaded, used by the default stages. None means all slices.
        echoes
            echoes that were loaded, used by the default stages. None means all echoes.

        Raises
        ------
        PipelineOrderError
            If a stage name is used twice or a stage is listed before a stage it requires.
        """
        self.raw_data = raw_data
        self.stages = list(default_stages(slices, echoes) if stages is None else stages)
        self.outputs: dict[str, Any] = {}

        seen: set[str] = set()
        for position, stage in enumerate(self.stages):
            if stage.name in seen:
                raise PipelineOrderError(f'Stage {stage.name} is listed twice', step=stage.name, index=position)
            missing = [name for name in stage.requires if name not in seen]
            if missing:
                raise PipelineOrderError(
                    f'Stage {stage.name} requires {", ".join(missing)} to be listed before',
                    step=stage.name,
                    index=position,
                )
            seen.add(stage.name)

    @property
    def completed(self) -> tuple[str, ...]:
        """Names of the stages that have run, in order."""
        return tuple(self.outputs)

    @property
    def pending(self) -> tuple[str, ...]:
        """Names of the stages that have not run yet, in order."""
        return tuple(stage.name for stage in self.stages if stage.name not in self.outputs)

    def run_stage(self, name: str) -> Any:  # noqa: ANN401
        """Run a single stage.

        Parameters
        ----------
        name
            name of the stage

        Returns
        -------
            output of the stage

        Raises
        ------
        PipelineOrderError
            If the stage is unknown, has already run or a required stage has not run yet.
        """
        stage = next((stage for stage in self.stages if stage.name == name), None)
        if stage is None:
            raise PipelineOrderError(f'Unknown stage {name}', step=name)
        if name in self.outputs:
            raise PipelineOrderError(f'Stage {name} has already run', step=name)
        missing = [required for required in stage.requires if required not in self.outputs]
        if missing:
            raise PipelineOrderError(f'Stage {name} requires {", ".join(missing)} to run before', step=name)
        self.outputs[name] = stage.function(self.raw_data)
        return self.outputs[name]

    def run(self) -> PreprocessingResult:
        """Run all pending stages in order.

        Returns
        -------
            noise and navigator data separated from the raw data
        """
        for name in self.pending:
            self.run_stage(name)
        navigator, navigator_time = self.outputs.get('extract_navigator', (None, None))
        return PreprocessingResult(
            noise=self.outputs.get('extract_noise'),
            navigator=navigator,
            navigator_time=navigator_time,
        )

    def annotate(self, acq_data: AcquisitionData) -> AcquisitionData:
        """Add echo times and missing subsample indices to converted data.

        Parameters
        ----------
        acq_data
            acquisition data converted from `raw_data`, modified in place

        Returns
        -------
            the annotated acquisition data
        """
        copy_te(self.raw_data, acq_data)
        adjust_subsample_indices(acq_data)
        return acq_data
