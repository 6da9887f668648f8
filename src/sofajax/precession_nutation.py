"""Bias-precession-nutation matrices, IAU 2000.

Composes the mean obliquity, the IAU 2000 precession-rate adjustments, the
frame bias and precession matrices and the nutation matrix into the full
GCRS-to-true-of-date rotation.  Supports classical (equinox-based) use
directly and CIO-based use through :func:`bpn2xy`.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

from typing import NamedTuple

from jax import Array
from jax.typing import ArrayLike

from sofajax.nutation import numat
from sofajax.obliquity import obl80
from sofajax.precession import bp00, pr00
from sofajax.vector_matrix import cr, rxr


class PrecessionNutation(NamedTuple):
    """Matrices and obliquity returned by :func:`pn00`.

    A :class:`~typing.NamedTuple`, so JAX treats it as a pytree and it can
    be returned from ``jax.jit`` and ``jax.vmap`` transformed functions.

    Attributes:
        epsa: Mean obliquity of date, consistent with the IAU 2000
            precession-nutation models (radians).
        rb: Frame bias matrix, GCRS to J2000.0 mean equator and equinox.
        rp: Precession matrix, J2000.0 to mean equator and equinox of date.
        rbp: Bias-precession matrix ``rp @ rb``, GCRS to mean of date.
        rn: Nutation matrix, mean of date to true equator and equinox of date.
        rbpn: Bias-precession-nutation matrix ``rn @ rbp``, GCRS to true
            equator and equinox of date.
    """

    epsa: Array
    rb: Array
    rp: Array
    rbp: Array
    rn: Array
    rbpn: Array


def pn00(
    date1: ArrayLike, date2: ArrayLike, dpsi: ArrayLike, deps: ArrayLike
) -> PrecessionNutation:
    """Precession-nutation, IAU 2000 model.

    The caller is responsible for providing the nutation components; they
    are in longitude and obliquity, in radians, and are with respect to the
    equinox and ecliptic of date.  For high-accuracy applications, free
    core nutation should be included as well as any other relevant
    corrections to the position of the CIP.

    Every matrix in the result is an independent value, so the outputs can
    be stored anywhere (including over each other) without affecting the
    remaining ones.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        dpsi: Nutation in longitude (radians).
        deps: Nutation in obliquity (radians).

    Returns:
        :class:`PrecessionNutation` with ``epsa``, ``rb``, ``rp``, ``rbp``,
        ``rn`` and ``rbpn``.

    References:

        1. Capitaine, N., Chapront, J., Lambert, S. and Wallace, P.,
           "Expressions for the Celestial Intermediate Pole and Celestial
           Ephemeris Origin consistent with the IAU 2000A precession-
           nutation model", Astron.Astrophys. 400, 1145-1154 (2003).
    """
    # IAU 2000 precession-rate adjustments
    _, depspr = pr00(date1, date2)

    # Mean obliquity, consistent with IAU 2000 precession-nutation
    epsa = obl80(date1, date2) + depspr

    # Frame bias and precession matrices and their product
    rb, rp, rbpw = bp00(date1, date2)
    rbp = cr(rbpw)

    # Nutation matrix
    rnw = numat(epsa, dpsi, deps)
    rn = cr(rnw)

    # Bias-precession-nutation matrix (classical)
    rbpn = rxr(rnw, rbpw)

    return PrecessionNutation(epsa=epsa, rb=rb, rp=rp, rbp=rbp, rn=rn, rbpn=rbpn)


def bpn2xy(rbpn: ArrayLike) -> tuple[Array, Array]:
    """Extract CIP X, Y coordinates from the bias-precession-nutation matrix.

    Args:
        rbpn: 3x3 bias-precession-nutation matrix.

    Returns:
        Tuple of (x, y) CIP coordinates.
    """
    return rbpn[2, 0], rbpn[2, 1]
