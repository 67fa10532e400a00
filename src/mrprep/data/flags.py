"""Decode and modify the packed acquisition flag field."""

from collections.abc import Sequence

import torch

from mrprep.data.enums import N_FLAG_BITS, AcqFlags
from mrprep.data.RawAcquisitionData import RawAcquisitionData
from mrprep.errors import MalformedFlagsError, ShapeMismatchError


def validate_flags(flags: int | Sequence[int] | torch.Tensor, step: str | None = None) -> torch.Tensor:
    """Check that flag integers fit into the unsigned 31 bit flag field.

    Parameters
    ----------
    flags
        one or more packed flag integers
    step
        name of the calling step, used in the error message

    Returns
    -------
        the flags as int64 tensor

    Raises
    ------
    MalformedFlagsError
        If any flag integer is negative or has bits above bit 30 set.
    """
    # check the python integers, ISMRMRD flags are uint64 and do not fit into int64
    if isinstance(flags, torch.Tensor):
        values = flags.flatten().tolist()
    elif isinstance(flags, Sequence):
        values = [int(value) for value in flags]
    else:
        values = [int(flags)]
    for index, value in enumerate(values):
        if not 0 <= value < 2**N_FLAG_BITS:
            raise MalformedFlagsError(
                f'Flag value {value} is outside the {N_FLAG_BITS} bit range',
                step=step,
                index=index,
            )
    if isinstance(flags, torch.Tensor):
        return flags.to(torch.int64)
    return torch.as_tensor(values if isinstance(flags, Sequence) else values[0], dtype=torch.int64)


def decode_flags(flags: int | Sequence[int] | torch.Tensor) -> torch.Tensor:
    """Unpack flag integers into boolean bit vectors.

    The bit order is little-endian, i.e. ``decode_flags(f)[..., b]`` is `True` if bit `b`
    (value ``2**b``) is set in `f`.

    Parameters
    ----------
    flags
        packed flag integer(s), shape `(...)`

    Returns
    -------
        boolean tensor with shape `(..., 31)`
    """
    flags_tensor = validate_flags(flags)
    bits = torch.arange(N_FLAG_BITS, dtype=torch.int64)
    return ((flags_tensor.unsqueeze(-1) >> bits) & 1).bool()


def extract_flags(
    raw_data: RawAcquisitionData,
    step: str | None = None,
    decoded: torch.Tensor | None = None,
) -> torch.Tensor:
    """Decode the flags of all profiles.

    Flags decoded before can be passed as `decoded`. They are only checked against the
    current profiles, e.g. to detect flags that were decoded before a step removed profiles.

    Parameters
    ----------
    raw_data
        raw data whose profiles are decoded
    step
        name of the calling step, used in error messages
    decoded
        flags decoded before, with shape `(profiles, 31)`. If None, the flags are decoded.

    Returns
    -------
        boolean tensor with shape `(profiles, 31)`

    Raises
    ------
    ShapeMismatchError
        If the number of decoded rows does not match the number of profiles.
    """
    if decoded is None:
        if not raw_data.profiles:
            return torch.zeros(0, N_FLAG_BITS, dtype=torch.bool)
        decoded = decode_flags(validate_flags([profile.flags for profile in raw_data.profiles], step=step))
    if decoded.shape != (len(raw_data.profiles), N_FLAG_BITS):
        raise ShapeMismatchError(
            f'Got flags with shape {tuple(decoded.shape)} for {len(raw_data.profiles)} profiles',
            step=step,
        )
    return decoded


def flag_set(flags: int, flag: AcqFlags) -> bool:
    """Test if all bits of `flag` are set in a packed flag integer."""
    return flags & flag.value == flag.value


def clear_flag(flags: int, flag: AcqFlags) -> int:
    """Clear a flag that is currently set.

    Parameters
    ----------
    flags
        packed flag integer
    flag
        flag to clear

    Returns
    -------
        the flag integer without `flag`

    Raises
    ------
    ValueError
        If `flag` is not set in `flags`.
    """
    if not flag_set(flags, flag):
        raise ValueError(f'{flag.name} is not set in {flags}.')
    return flags & ~flag.value
