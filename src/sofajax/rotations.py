"""Elementary rotation matrices.

The matrices follow the SOFA ``iauRx``/``iauRy``/``iauRz`` convention: a
positive angle rotates the coordinate frame anticlockwise as seen looking
towards the origin from positive values of the axis, so each matrix has
``+sin`` above the diagonal for ``Rx`` and ``Rz``.  Applying ``Rx(phi)``
to an existing matrix ``r`` in SOFA (``iauRx(phi, r)``) is ``Rx(phi) @ r``
here.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from sofajax.config import get_dtype


def Rx(angle: ArrayLike) -> Array:
    """Rotation matrix, for a rotation about the x-axis.

    Args:
        angle (ArrayLike): Counter-clockwise angle of rotation in radians, as
            viewed looking back along the positive direction of the rotation axis.

    Returns:
        Array: Rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[1.0,  0.0,  0.0],
                      [0.0,   +c,   +s],
                      [0.0,   -s,   +c]], dtype=get_dtype())


def Ry(angle: ArrayLike) -> Array:
    """Rotation matrix, for a rotation about the y-axis.

    Args:
        angle (ArrayLike): Counter-clockwise angle of rotation in radians, as
            viewed looking back along the positive direction of the rotation axis.

    Returns:
        Array: Rotation matrix.
    """
    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[ +c,  0.0,   -s],
                      [0.0, +1.0,  0.0],
                      [ +s,  0.0,   +c]], dtype=get_dtype())


def Rz(angle: ArrayLike) -> Array:
    """Rotation matrix, for a rotation about the z-axis.

    Args:
        angle (ArrayLike): Counter-clockwise angle of rotation in radians, as
            viewed looking back along the positive direction of the rotation axis.

    Returns:
        Array: Rotation matrix.
    """
    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[ +c,   +s,  0.0],
                      [ -s,   +c,  0.0],
                      [0.0,  0.0,  1.0]], dtype=get_dtype())
