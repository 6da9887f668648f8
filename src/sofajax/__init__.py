"""
sofajax is a small library of IAU SOFA reference-frame and astrometry routines implemented in JAX.
"""

from .constants import (
    D2PI,
    DAS2R,
    DR2AS,
    TURNAS,
    DJ00,
    DJC,
    MJD_ZERO,
    DAYSEC,
    AULT,
    SRS,
)

from .config import set_dtype, get_dtype, get_matrix_tolerance

from .rotations import (
    Rx,
    Ry,
    Rz,
)

from .vector_matrix import (
    pdp,
    pxp,
    pn,
    ppsp,
    ir,
    cr,
    tr,
    rxr,
    rxp,
    trxp,
)

from .obliquity import obl80, obl06
from .precession import pr00, bi00, bp00, pmat00
from .nutation import numat
from .precession_nutation import PrecessionNutation, pn00, bpn2xy
from .refraction import refco, refz
from .astrometry import DeflectingBody, stack_bodies, ld, ldsun, ldn

from .frames import (
    rotation_gcrs_to_mean,
    rotation_gcrs_to_true,
    rotation_true_to_gcrs,
    position_gcrs_to_true,
    position_true_to_gcrs,
)

__all__ = [
    # Constants
    "D2PI",
    "DAS2R",
    "DR2AS",
    "TURNAS",
    "DJ00",
    "DJC",
    "MJD_ZERO",
    "DAYSEC",
    "AULT",
    "SRS",
    # Config
    "set_dtype",
    "get_dtype",
    "get_matrix_tolerance",
    # Rotations
    "Rx",
    "Ry",
    "Rz",
    # Vector/Matrix
    "pdp",
    "pxp",
    "pn",
    "ppsp",
    "ir",
    "cr",
    "tr",
    "rxr",
    "rxp",
    "trxp",
    # Obliquity
    "obl80",
    "obl06",
    # Precession
    "pr00",
    "bi00",
    "bp00",
    "pmat00",
    # Nutation
    "numat",
    # Precession-Nutation
    "PrecessionNutation",
    "pn00",
    "bpn2xy",
    # Refraction
    "refco",
    "refz",
    # Astrometry
    "DeflectingBody",
    "stack_bodies",
    "ld",
    "ldsun",
    "ldn",
    # Frames
    "rotation_gcrs_to_mean",
    "rotation_gcrs_to_true",
    "rotation_true_to_gcrs",
    "position_gcrs_to_true",
    "position_true_to_gcrs",
]
