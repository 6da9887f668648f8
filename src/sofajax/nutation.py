"""Nutation matrix from nutation components.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

from jax import Array
from jax.typing import ArrayLike

from sofajax.rotations import Rx, Rz


def numat(epsa: ArrayLike, dpsi: ArrayLike, deps: ArrayLike) -> Array:
    """Form the matrix of nutation.

    The matrix operates in the sense ``V(true) = rmatn @ V(mean)``, where
    ``V(true)`` is with respect to the true equatorial triad of date and
    ``V(mean)`` is with respect to the mean equatorial triad of date:
    ``rmatn = R_1(-(epsa + deps)) . R_3(-dpsi) . R_1(epsa)``.

    Args:
        epsa: Mean obliquity of date (radians).
        dpsi: Nutation in longitude (radians).
        deps: Nutation in obliquity (radians).

    Returns:
        3x3 nutation matrix.

    References:

        1. Explanatory Supplement to the Astronomical Almanac,
           P. Kenneth Seidelmann (ed), University Science Books (1992),
           Section 3.222-3.
    """
    return Rx(-(epsa + deps)) @ Rz(-dpsi) @ Rx(epsa)
