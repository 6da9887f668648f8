"""Gravitational light deflection.

Applies the deflection of light by solar-system bodies, as part of
transforming coordinate direction into natural direction.  The vectors
supplied must be of unit magnitude and the deflection limiter non-zero and
positive; for efficiency no validation is performed.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

from typing import NamedTuple

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from sofajax.config import get_dtype
from sofajax.constants import AULT, DAYSEC, SRS
from sofajax.vector_matrix import pdp, pn, ppsp, pxp


class DeflectingBody(NamedTuple):
    """Parameters of a body that deflects light.

    A batch of bodies is represented by the same tuple with a leading axis
    on every field, as produced by :func:`stack_bodies`.

    Attributes:
        bm: Mass of the body (solar masses).
        dl: Deflection limiter, ``phi^2/2`` where ``phi`` is the angular
            separation (radians) between source and body at which limiting
            is applied.
        pv: Barycentric position (au) and velocity (au/day) of the body,
            shape ``(2, 3)``.
    """

    bm: Array
    dl: Array
    pv: Array


def stack_bodies(*bodies: DeflectingBody) -> DeflectingBody:
    """Stack individual :class:`DeflectingBody` values into a batch for :func:`ldn`.

    The order is preserved; :func:`ldn` applies the bodies in that order.

    Args:
        *bodies: One or more deflecting bodies.

    Returns:
        DeflectingBody with ``bm`` and ``dl`` of shape ``(n,)`` and ``pv`` of
        shape ``(n, 2, 3)``.

    Raises:
        ValueError: If no bodies are given or a ``pv`` is not shape ``(2, 3)``.
    """
    if len(bodies) == 0:
        raise ValueError("At least one deflecting body is required.")

    dtype = get_dtype()
    pvs = []
    for i, body in enumerate(bodies):
        pv = jnp.asarray(body.pv, dtype=dtype)
        if pv.shape != (2, 3):
            raise ValueError(
                f"Body {i} has pv of shape {pv.shape}, expected (2, 3)."
            )
        pvs.append(pv)

    return DeflectingBody(
        bm=jnp.array([b.bm for b in bodies], dtype=dtype),
        dl=jnp.array([b.dl for b in bodies], dtype=dtype),
        pv=jnp.stack(pvs),
    )


def ld(
    bm: ArrayLike,
    p: ArrayLike,
    q: ArrayLike,
    e: ArrayLike,
    em: ArrayLike,
    dlim: ArrayLike,
) -> Array:
    """Apply light deflection by a solar-system body.

    The algorithm is based on Expr. (70) in Klioner (2003) and Expr. (7.63)
    in the Explanatory Supplement (Urban & Seidelmann 2013), with some
    rearrangement to minimize the effects of machine precision.

    The deflection limiter ``dlim`` is ``phi^2/2``, where ``phi`` is the
    angular separation between source and body at which limiting is
    applied.  As ``phi`` shrinks below the threshold the deflection is
    artificially reduced, reaching zero for ``phi = 0``.

    To accumulate the deflection from several bodies, call this function
    for each body in succession, in decreasing order of distance from the
    observer (or use :func:`ldn`).

    Args:
        bm: Mass of the gravitating body (solar masses).
        p: Direction from observer to source (unit vector).
        q: Direction from body to source (unit vector).
        e: Direction from body to observer (unit vector).
        em: Distance from body to observer (au).
        dlim: Deflection limiter.

    Returns:
        Observer to deflected source direction.  Not renormalized, but the
        departure from unit magnitude is always negligible.

    References:

        1. Urban, S. & Seidelmann, P. K. (eds), Explanatory Supplement to
           the Astronomical Almanac, 3rd ed., University Science Books (2013).
        2. Klioner, Sergei A., "A practical relativistic model for micro-
           arcsecond astrometry in space", Astr. J. 125, 1580-1597 (2003).
    """
    p = jnp.asarray(p)
    q = jnp.asarray(q)
    e = jnp.asarray(e)

    # q . (q + e)
    qdqpe = pdp(q, q + e)

    # 2 x G x bm / ( em x c^2 x ( q . (q + e) ) )
    w = bm * SRS / em / jnp.maximum(qdqpe, dlim)

    # p x (e x q)
    peq = pxp(p, pxp(e, q))

    return p + w * peq


def ldsun(p: ArrayLike, e: ArrayLike, em: ArrayLike) -> Array:
    """Deflection of starlight by the Sun.

    The deflection is restrained when the angle between the star and the
    center of the Sun is less than a threshold value, falling to zero
    deflection for zero separation.  The chosen threshold is 1e-6 radians
    for observers inside the orbit of the Earth, scaling as ``1/em^2``
    farther out.

    Args:
        p: Direction from observer to star (unit vector).
        e: Direction from Sun to observer (unit vector).
        em: Distance from Sun to observer (au).

    Returns:
        Observer to deflected star direction (not renormalized).
    """
    em2 = jnp.maximum(em * em, 1.0)
    dlim = 1e-6 / em2

    return ld(1.0, p, p, e, em, dlim)


def ldn(bodies: DeflectingBody, ob: ArrayLike, sc: ArrayLike) -> Array:
    """Deflection of starlight by a set of solar-system bodies.

    Each body is applied in the order given, so the bodies should be
    supplied in decreasing order of distance from the observer (the Sun
    last for a terrestrial observer).  For each body the position is
    backdated to the time the light passed it, which matters for close
    approaches to Jupiter and Saturn.

    Args:
        bodies: Batched :class:`DeflectingBody` (see :func:`stack_bodies`).
        ob: Barycentric position of the observer (au).
        sc: Observer to star coordinate direction (unit vector).

    Returns:
        Observer to deflected star direction (unit vector to machine
        precision).
    """
    dtype = get_dtype()
    ob = jnp.asarray(ob, dtype=dtype)
    sc = jnp.asarray(sc, dtype=dtype)

    # Light time for 1 au (days)
    cr_days = AULT / DAYSEC

    def _apply(sn, body):
        bm, dl, pv = body

        # Body to observer vector at epoch of observation (au)
        v = ob - pv[0]

        # Minus the time since the light passed the body (days), zero if
        # the light hasn't reached the body yet
        dt = jnp.minimum(pdp(sn, v) * cr_days, 0.0)

        # Backtrack the body to the time the light was passing it
        ev = ppsp(v, -dt, pv[1])
        em, e = pn(ev)

        return ld(bm, sn, sn, e, em, dl), None

    sn, _ = jax.lax.scan(_apply, sc, (bodies.bm, bodies.dl, bodies.pv))
    return sn
