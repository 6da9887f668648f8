"""Atmospheric refraction constants.

Implements the two-term refraction model ``dZ = A tan Z + B tan^3 Z``,
where ``Z`` is the observed (refracted) zenith distance and ``dZ`` is what
to add to ``Z`` to give the topocentric (in vacuo) zenith distance.

Outlandish input parameters are silently limited to mathematically safe
values rather than rejected.  Zero pressure is permissible and causes
zeroes to be returned.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from sofajax.config import get_dtype

_OPTICAL_LIMIT: float = 100.0
"""Wavelength at and below which the optical/IR formulae apply [micrometres]."""


def refco(
    phpa: ArrayLike, tc: ArrayLike, rh: ArrayLike, wl: ArrayLike
) -> tuple[Array, Array]:
    """Determine the constants A and B in the atmospheric refraction model.

    A wavelength in the range 0-100 selects the optical/IR case and is
    wavelength in micrometres.  Any value above that selects the radio
    case.  The choice is made before the wavelength is clamped.

    Inputs are clamped as follows: temperature to [-150, 200] deg C,
    pressure to [0, 10000] hPa, relative humidity to [0, 1] and wavelength
    to [0.1, 1e6] micrometres.

    The model omits the effects of height above sea level (apart from the
    reduced pressure itself), latitude, variations in tropospheric lapse
    rate and dispersive effects in the radio.  With respect to raytracing
    through a model atmosphere the worst/RMS errors are 62/8 mas for
    optical/IR and 319/49 mas for radio.

    Args:
        phpa: Pressure at the observer (hPa = millibar).
        tc: Ambient temperature at the observer (deg C).
        rh: Relative humidity at the observer (range 0-1).
        wl: Wavelength (micrometres).

    Returns:
        Tuple of (refa, refb): the ``tan Z`` and ``tan^3 Z`` coefficients
        in radians.

    References:

        1. Crane, R.K., Meeks, M.L. (ed), "Refraction Effects in the Neutral
           Atmosphere", Methods of Experimental Physics: Astrophysics 12B,
           Academic Press, 1976.
        2. Gill, Adrian E., "Atmosphere-Ocean Dynamics", Academic Press, 1982.
        3. Green, R.M., "Spherical Astronomy", Cambridge University Press, 1987.
        4. Hohenkerk, C.Y., & Sinclair, A.T., NAO Technical Note No. 63, 1985.
        5. Rueger, J.M., "Refractive Index Formulae for Electronic Distance
           Measurement with Radio and Millimetre Waves", Unisurv Report
           S-68, UNSW, 2002.
        6. Stone, Ronald C., P.A.S.P. 108, 1051-1058, 1996.
    """
    # Decide whether optical/IR or radio case: switch at 100 microns.
    # Tested on the input wavelength, before any narrowing cast.
    optic = jnp.asarray(wl) <= _OPTICAL_LIMIT

    dtype = get_dtype()
    phpa = jnp.asarray(phpa, dtype=dtype)
    tc = jnp.asarray(tc, dtype=dtype)
    rh = jnp.asarray(rh, dtype=dtype)
    wl = jnp.asarray(wl, dtype=dtype)

    # Restrict parameters to safe values
    t = jnp.clip(tc, -150.0, 200.0)
    p = jnp.clip(phpa, 0.0, 10000.0)
    r = jnp.clip(rh, 0.0, 1.0)
    w = jnp.clip(wl, 0.1, 1e6)

    # Water vapour pressure at the observer
    p_safe = jnp.where(p > 0.0, p, 1.0)
    ps = jnp.power(10.0, (0.7859 + 0.03477 * t) / (1.0 + 0.00412 * t)) * (
        1.0 + p * (4.5e-6 + 6e-10 * t * t)
    )
    pw = jnp.where(p > 0.0, r * ps / (1.0 - (1.0 - r) * ps / p_safe), 0.0)

    # Refractive index minus 1 at the observer
    tk = t + 273.15
    wlsq = w * w
    gamma_optic = ((77.53484e-6 + (4.39108e-7 + 3.666e-9 / wlsq) / wlsq) * p - 11.2684e-6 * pw) / tk
    gamma_radio = (77.6890e-6 * p - (6.3938e-6 - 0.375463 / tk) * pw) / tk
    gamma = jnp.where(optic, gamma_optic, gamma_radio)

    # Formula for beta from Stone, with empirical adjustments
    beta = 4.4474e-6 * tk
    beta = jnp.where(optic, beta, beta - 0.0074 * pw * beta)

    # Refraction constants from Green
    refa = gamma * (1.0 - beta)
    refb = -gamma * (beta - gamma / 2.0)

    return refa, refb


def refz(zobs: ArrayLike, refa: ArrayLike, refb: ArrayLike) -> Array:
    """Apply the refraction model to an observed zenith distance.

    Computes ``Z + A tan Z + B tan^3 Z``.  The two-term model is only
    meaningful away from the horizon; no limiting is applied here.

    Args:
        zobs: Observed (refracted) zenith distance (radians).
        refa: ``tan Z`` coefficient from :func:`refco` (radians).
        refb: ``tan^3 Z`` coefficient from :func:`refco` (radians).

    Returns:
        Topocentric (in vacuo) zenith distance in radians.
    """
    tz = jnp.tan(zobs)
    return zobs + (refa + refb * tz * tz) * tz
