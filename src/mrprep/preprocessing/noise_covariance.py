"""Coil noise covariance."""

import torch
from einops import einsum


def noise_covariance(noise: torch.Tensor) -> torch.Tensor:
    """Calculate the noise covariance between the receiver coils.

    More information can be found in [HAN2014]_ [ROE1990]_.

    Parameters
    ----------
    noise
        noise samples with shape `(k0, coils)`, e.g. from `extract_noise_data`

    Returns
    -------
        noise covariance matrix with shape `(coils, coils)`

    References
    ----------
    .. [HAN2014] Hansen M, Kellman P (2014) Image reconstruction: An overview for clinicians. JMRI 41(3)
            https://doi.org/10.1002/jmri.24687
    .. [ROE1990] Roemer P, Mueller O (1990) The NMR phased array. MRM 16(2)
            https://doi.org/10.1002/mrm.1910160203
    """
    if noise.ndim != 2:
        raise ValueError(f'Noise samples must have shape (k0, coils), got {tuple(noise.shape)}.')
    return (1.0 / noise.shape[0]) * einsum(noise, noise.conj(), 'k0 coil1, k0 coil2 -> coil1 coil2')
