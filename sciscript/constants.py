"""
Physical and mathematical constants exposed to scripts.

Values are CODATA / SI exact where defined.
"""

import math

# ratio of a circle's circumference to its diameter
pi = math.pi

# speed of light in vacuum (m/s), exact
c = 299_792_458.0

# Euler's number
e = math.e

# standard acceleration of gravity (m/s^2), exact
g = 9.80665

# Planck constant (J/Hz), exact
h = 6.626_070_15e-34

# golden ratio
phi = (1.0 + math.sqrt(5.0)) / 2.0

# Newtonian constant of gravitation (m^3 kg^-1 s^-2)
G = 6.674_30e-11

CONSTANTS = {
    'pi': pi,
    'c': c,
    'e': e,
    'g': g,
    'h': h,
    'phi': phi,
    'G': G,
}
