from .profile import NumericProfile
from .trig_poly import TrigPoly, construct, degree, random_trig_poly, to_flat_vector

__all__ = [
    "NumericProfile",
    "TrigPoly",
    "construct",
    "degree",
    "random_trig_poly",
    "to_flat_vector",
]
