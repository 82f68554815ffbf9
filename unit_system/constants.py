"""
Physical constants used by the conversion tables.

All values are CODATA 2018 (SI exact where the 2019 redefinition fixed them).
DO NOT change these values without updating the tests that pin them.
"""

# ═══════════════════════════════════════════════════════════════════════
# §1  ATOMIC UNITS (Hartree)
# ═══════════════════════════════════════════════════════════════════════

# Bohr radius in m (a₀)
BOHR_RADIUS = 5.29177210903e-11

# Hartree energy in J (Eh)
HARTREE_ENERGY = 4.3597447222071e-18

# Electron rest mass in kg (mₑ)
ELECTRON_MASS = 9.1093837015e-31

# Atomic unit of time in s (ℏ/Eh)
ATOMIC_TIME = 2.4188843265857e-17

# Elementary charge in C (e)
ELEMENTARY_CHARGE = 1.602176634e-19

# Derived atomic units
ATOMIC_VELOCITY = 2.18769126364e6           # m/s   (a₀Eh/ℏ)
ATOMIC_ELECTRIC_FIELD = 5.14220674763e11    # V/m   (Eh/(e·a₀))
ATOMIC_MAGNETIC_FIELD = 2.35051756758e5     # T     (ℏ/(e·a₀²))
ATOMIC_FORCE = HARTREE_ENERGY / BOHR_RADIUS         # N   (Eh/a₀)
ATOMIC_PRESSURE = HARTREE_ENERGY / BOHR_RADIUS**3   # Pa  (Eh/a₀³)
ATOMIC_FREQUENCY = 1.0 / ATOMIC_TIME                # Hz  (Eh/ℏ)

# ═══════════════════════════════════════════════════════════════════════
# §2  OTHER REFERENCE VALUES
# ═══════════════════════════════════════════════════════════════════════

# Speed of light in vacuum in m/s (exact)
SPEED_OF_LIGHT = 299792458.0

# 1 statV/cm expressed in V/m (c / 10⁴)
STATVOLT_PER_CM = 29979.2458

# Temperature equivalents: T = E / k_B
KELVIN_PER_EV = 11604.518
KELVIN_PER_HARTREE = 315775.02

# Absolute-zero offsets
CELSIUS_OFFSET = 273.15
FAHRENHEIT_OFFSET = 459.67
