"""Errors raised by the preprocessing steps."""


class PreprocessingError(Exception):
    """Base class for all errors raised while preprocessing raw data.

    Each error records the preprocessing step that failed and, where applicable,
    the offending profile, contrast, slice or line index.
    """

    def __init__(self, message: str, step: str | None = None, index: int | None = None):
        """Initialize.

        Parameters
        ----------
        message
            description of the problem
        step
            name of the preprocessing step that raised the error
        index
            offending index, e.g. of a profile, contrast or navigator line
        """
        self.step = step
        self.index = index
        context = []
        if step is not None:
            context.append(f'step {step}')
        if index is not None:
            context.append(f'index {index}')
        if context:
            message = f'{message} ({", ".join(context)})'
        super().__init__(message)


class ShapeMismatchError(PreprocessingError, ValueError):
    """Raised if the number of decoded flag rows differs from the number of profiles."""


class MissingNoiseProfileError(PreprocessingError, LookupError):
    """Raised if no profile carries the noise measurement flag."""


class IndexOutOfRangeError(PreprocessingError, IndexError):
    """Raised if an index exceeds the available echo times, profiles or navigator array."""


class MalformedFlagsError(PreprocessingError, ValueError):
    """Raised if an acquisition flag integer is negative or does not fit into 31 bits."""


class PipelineOrderError(PreprocessingError, RuntimeError):
    """Raised if preprocessing stages are run out of order or more than once."""
