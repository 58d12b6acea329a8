# tubcalc/constants.py
"""Shared constants for the tub deflection calculator."""

SMALL_NUMBER = 1e-9

# Units (inch-pound-second base)
lb, inch, sec = 1.0, 1.0, 1.0

ft = 12 * inch
psi = lb / inch ** 2
ksi = 1000 * psi

mm = inch / 25.4
INCH_TO_MM = 25.4

# Approximate Poisson's ratio for MDF
POISSON_MDF = 0.30
