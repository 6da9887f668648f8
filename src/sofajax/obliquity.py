"""Mean obliquity of the ecliptic.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

from jax import Array
from jax.typing import ArrayLike

from sofajax.config import get_dtype
from sofajax.constants import DAS2R, DJ00, DJC


def obl80(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Mean obliquity of the ecliptic, IAU 1980 model.

    The TT date ``date1 + date2`` is a Julian Date, apportioned in any
    convenient way between the two arguments, e.g. ``(2451545.0, -1421.3)``
    (J2000 method) or ``(2400000.5, 50123.2)`` (MJD method).  Only the sum
    matters, but the J2000 method gives the best resolution.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Angle between the ecliptic and mean equator of date, in radians.

    References:

        1. Explanatory Supplement to the Astronomical Almanac,
           P. Kenneth Seidelmann (ed), University Science Books (1992),
           Expression 3.222-1 (p114).
    """
    dtype = get_dtype()
    t = dtype(((date1 - DJ00) + date2) / DJC)

    return DAS2R * (84381.448 + (-46.8150 + (-0.00059 + 0.001813 * t) * t) * t)


def obl06(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Mean obliquity of the ecliptic, IAU 2006 precession.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Obliquity of the ecliptic in radians.
    """
    dtype = get_dtype()
    t = dtype(((date1 - DJ00) + date2) / DJC)
    eps0 = 84381.406 + t * (
        -46.836769 + t * (-0.0001831 + t * (0.00200340 + t * (-0.000000576 + t * (-0.0000000434))))
    )
    return eps0 * DAS2R
