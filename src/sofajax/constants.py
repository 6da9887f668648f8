"""
The `constants` module defines the SOFA constants shared by the
reference-frame and astrometry routines.

Values follow ``sofam.h`` from the IAU SOFA software collection.
"""

from jax.numpy import pi as PI

# Angular Constants

D2PI: float = 2.0 * PI
"""2*pi. Units: *rad*"""

DAS2R: float = 4.848136811095359935899141e-6
"""Arcseconds to radians. Units: *rad/as*"""

DR2AS: float = 206264.8062470963551564734
"""Radians to arcseconds. Units: *as/rad*"""

TURNAS: float = 1296000.0
"""Arcseconds in a full circle. Units: *as*"""

# Time Constants

DJ00: float = 2451545.0
"""Julian Date of the J2000.0 reference epoch. Units: *days*"""

DJC: float = 36525.0
"""Days per Julian century. Units: *days*"""

MJD_ZERO: float = 2400000.5
"""Julian Date of the Modified Julian Date zero-point. Units: *days*"""

DAYSEC: float = 86400.0
"""Seconds per day. Units: *s*"""

# Physical Constants

AULT: float = 499.004782
"""
Light time for one astronomical unit. Units: *s*

References:

1. IAU SOFA, ``sofam.h``.
"""

SRS: float = 1.97412574336e-8
"""
Schwarzschild radius of the Sun, 2 GM_sun / c^2. Units: *au*

References:

1. IAU SOFA, ``sofam.h``.
"""
