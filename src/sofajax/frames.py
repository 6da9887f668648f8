"""GCRS to mean/true equator and equinox of date transformations.

Descriptive wrappers around the IAU 2000 bias-precession-nutation chain
(:func:`~sofajax.precession_nutation.pn00`):

- **Bias-precession** (GCRS -> mean of date)
- **Bias-precession-nutation** (GCRS -> true of date)

Dates are TT as 2-part Julian Dates and the nutation components are
supplied by the caller in radians.  Positions may be in any length unit;
the rotations preserve it.
"""

from __future__ import annotations

from jax import Array
from jax.typing import ArrayLike

from sofajax.precession import pmat00
from sofajax.precession_nutation import pn00
from sofajax.vector_matrix import rxp, tr, trxp


def rotation_gcrs_to_mean(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Rotation matrix from GCRS to the mean equator and equinox of date.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 bias-precession matrix.
    """
    return pmat00(date1, date2)


def rotation_gcrs_to_true(
    date1: ArrayLike, date2: ArrayLike, dpsi: ArrayLike, deps: ArrayLike
) -> Array:
    """Rotation matrix from GCRS to the true equator and equinox of date.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        dpsi: Nutation in longitude (radians).
        deps: Nutation in obliquity (radians).

    Returns:
        3x3 bias-precession-nutation matrix.
    """
    return pn00(date1, date2, dpsi, deps).rbpn


def rotation_true_to_gcrs(
    date1: ArrayLike, date2: ArrayLike, dpsi: ArrayLike, deps: ArrayLike
) -> Array:
    """Rotation matrix from the true equator and equinox of date to GCRS.

    Transpose of :func:`rotation_gcrs_to_true`.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        dpsi: Nutation in longitude (radians).
        deps: Nutation in obliquity (radians).

    Returns:
        3x3 rotation matrix.
    """
    return tr(rotation_gcrs_to_true(date1, date2, dpsi, deps))


def position_gcrs_to_true(
    x_gcrs: ArrayLike,
    date1: ArrayLike,
    date2: ArrayLike,
    dpsi: ArrayLike,
    deps: ArrayLike,
) -> Array:
    """Transform a GCRS position (or direction) to true equator and equinox of date.

    Args:
        x_gcrs: GCRS position or direction, shape ``(3,)``.
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        dpsi: Nutation in longitude (radians).
        deps: Nutation in obliquity (radians).

    Returns:
        Position in the true-of-date frame, shape ``(3,)``.
    """
    return rxp(rotation_gcrs_to_true(date1, date2, dpsi, deps), x_gcrs)


def position_true_to_gcrs(
    x_true: ArrayLike,
    date1: ArrayLike,
    date2: ArrayLike,
    dpsi: ArrayLike,
    deps: ArrayLike,
) -> Array:
    """Transform a true-of-date position (or direction) to GCRS.

    Args:
        x_true: Position or direction in the true-of-date frame, shape ``(3,)``.
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        dpsi: Nutation in longitude (radians).
        deps: Nutation in obliquity (radians).

    Returns:
        GCRS position, shape ``(3,)``.
    """
    return trxp(rotation_gcrs_to_true(date1, date2, dpsi, deps), x_true)
