"""Frame bias and precession, IAU 2000.

Implements the IAU 1976 precession angles with the IAU 2000
precession-rate corrections, together with the ICRS/GCRS frame bias.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from sofajax.config import get_dtype
from sofajax.constants import DAS2R, DJ00, DJC
from sofajax.rotations import Rx, Ry, Rz

# Precession and obliquity corrections (radians per century)
_PRECOR: float = -0.29965 * DAS2R
_OBLCOR: float = -0.02524 * DAS2R

# The frame bias corrections in longitude and obliquity
_DPBIAS: float = -0.041775 * DAS2R
_DEBIAS: float = -0.0068192 * DAS2R

# The ICRS RA of the J2000.0 equinox (Chapront et al., 2002)
_DRA0: float = -0.0146 * DAS2R

# J2000.0 obliquity (Lieske et al. 1977)
_EPS0: float = 84381.448 * DAS2R


def pr00(date1: ArrayLike, date2: ArrayLike) -> tuple[Array, Array]:
    """Precession-rate part of the IAU 2000 precession-nutation models.

    The corrections are to be added to the IAU 1976 precession quantities
    (luni-solar precession in longitude and obliquity), i.e. they are the
    differences between IAU 2000 and IAU 1976 precession rates.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of (dpsipr, depspr) precession corrections in longitude and
        obliquity [radians].

    References:

        1. Lieske, J.H., Lederle T., Fricke, W. & Morando, B., "Expressions
           for the precession quantities based upon the IAU (1976) System
           of Astronomical Constants", Astron.Astrophys., 58, 1-16 (1977).
        2. Mathews, P.M., Herring, T.A., Buffet, B.A., "Modeling of
           nutation and precession: New nutation series for nonrigid Earth
           and insights into the Earth's interior", J.Geophys.Res., 107,
           B4, 2002.
    """
    dtype = get_dtype()
    t = dtype(((date1 - DJ00) + date2) / DJC)

    dpsipr = _PRECOR * t
    depspr = _OBLCOR * t

    return dpsipr, depspr


def bi00() -> tuple[Array, Array, Array]:
    """Frame bias components of the IAU 2000 precession-nutation models.

    Returns:
        Tuple of (dpsibi, depsbi, dra) in radians: longitude and obliquity
        corrections and the ICRS RA of the J2000.0 mean equinox.

    References:

        1. Chapront, J., Chapront-Touze, M. & Francou, G., Astron.Astrophys.,
           387, 700, 2002.
    """
    dtype = get_dtype()
    return dtype(_DPBIAS), dtype(_DEBIAS), dtype(_DRA0)


def bp00(date1: ArrayLike, date2: ArrayLike) -> tuple[Array, Array, Array]:
    """Frame bias and precession, IAU 2000.

    Forms the GCRS-to-J2000 frame bias matrix, the J2000-to-date
    precession matrix and their product.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of (rb, rp, rbp):

        - ``rb``: frame bias matrix, GCRS to J2000.0 mean equator and equinox.
        - ``rp``: precession matrix, J2000.0 to mean equator and equinox of date.
        - ``rbp``: bias-precession matrix ``rp @ rb``, GCRS to mean of date.
    """
    dtype = get_dtype()
    t = dtype(((date1 - DJ00) + date2) / DJC)

    dpsibi, depsbi, dra0 = bi00()

    # Precession angles (Lieske et al. 1977)
    psia77 = (5038.7784 + (-1.07259 + (-0.001147) * t) * t) * t * DAS2R
    oma77 = _EPS0 + ((0.05127 + (-0.007726) * t) * t) * t * DAS2R
    chia = (10.5526 + (-2.38064 + (-0.001125) * t) * t) * t * DAS2R

    # Apply IAU 2000 precession corrections
    dpsipr, depspr = pr00(date1, date2)
    psia = psia77 + dpsipr
    oma = oma77 + depspr

    # Frame bias matrix: GCRS to J2000.0
    rb = Rx(-depsbi) @ Ry(dpsibi * jnp.sin(_EPS0)) @ Rz(dra0)

    # Precession matrix: J2000.0 to mean of date
    rp = Rz(chia) @ Rx(-oma) @ Rz(-psia) @ Rx(_EPS0)

    # Bias-precession matrix: GCRS to mean of date
    rbp = rp @ rb

    return rb, rp, rbp


def pmat00(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Precession matrix (including frame bias) from GCRS to mean of date, IAU 2000.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 bias-precession matrix.
    """
    _, _, rbp = bp00(date1, date2)
    return rbp
