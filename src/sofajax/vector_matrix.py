"""Vector and matrix primitives for 3-vectors and 3x3 rotation matrices.

JAX translations of the SOFA vector/matrix library routines used by the
precession-nutation and astrometry functions.  Matrices are row-major
``(3, 3)`` arrays and ``rxr(a, b)`` applies ``b`` first.

JAX arrays are immutable, so every function returns a fresh value and an
output can never overwrite an input that is still to be read.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from sofajax.config import get_dtype


def pdp(a: ArrayLike, b: ArrayLike) -> Array:
    """Inner (dot) product of two 3-vectors.

    Args:
        a: First 3-vector.
        b: Second 3-vector.

    Returns:
        Scalar ``a . b``.
    """
    a = jnp.asarray(a)
    b = jnp.asarray(b)
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def pxp(a: ArrayLike, b: ArrayLike) -> Array:
    """Outer (cross) product of two 3-vectors, right-handed.

    Args:
        a: First 3-vector.
        b: Second 3-vector.

    Returns:
        3-vector ``a x b``.
    """
    a = jnp.asarray(a)
    b = jnp.asarray(b)
    return jnp.array(
        [
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        ]
    )


def pn(p: ArrayLike) -> tuple[Array, Array]:
    """Convert a 3-vector into modulus and unit vector.

    A null vector returns a zero modulus and a null unit vector.

    Args:
        p: 3-vector.

    Returns:
        Tuple of (modulus, unit vector).
    """
    p = jnp.asarray(p)
    w = jnp.sqrt(pdp(p, p))
    safe_w = jnp.where(w == 0.0, 1.0, w)
    u = jnp.where(w == 0.0, jnp.zeros_like(p), p / safe_w)
    return w, u


def ppsp(a: ArrayLike, s: ArrayLike, b: ArrayLike) -> Array:
    """P-vector plus scaled p-vector: ``a + s * b``."""
    return jnp.asarray(a) + s * jnp.asarray(b)


def ir() -> Array:
    """Identity r-matrix in the configured dtype."""
    return jnp.eye(3, dtype=get_dtype())


def cr(r: ArrayLike) -> Array:
    """Copy an r-matrix.

    Copying a matrix onto itself is a no-op; the result always compares
    equal to the input.

    Args:
        r: 3x3 matrix.

    Returns:
        An independent 3x3 array with the same elements.
    """
    return jnp.array(r, copy=True)


def tr(r: ArrayLike) -> Array:
    """Transpose an r-matrix."""
    return jnp.transpose(jnp.asarray(r))


def rxr(a: ArrayLike, b: ArrayLike) -> Array:
    """Multiply two r-matrices, ``a @ b``.

    The combined rotation applies ``b`` first and then ``a``.

    Args:
        a: First 3x3 matrix.
        b: Second 3x3 matrix.

    Returns:
        3x3 product matrix.
    """
    return jnp.matmul(jnp.asarray(a), jnp.asarray(b))


def rxp(r: ArrayLike, p: ArrayLike) -> Array:
    """Multiply a 3-vector by an r-matrix, ``r @ p``."""
    return jnp.matmul(jnp.asarray(r), jnp.asarray(p))


def trxp(r: ArrayLike, p: ArrayLike) -> Array:
    """Multiply a 3-vector by the transpose of an r-matrix, ``r.T @ p``."""
    return jnp.matmul(tr(r), jnp.asarray(p))
