"""Conversion of input quantities to the units the correlations expect.

Temperature to degC (ITS-90), salinity to g/kg and pressure to MPa, with
the unit labels of the MIT seawater property library.
"""


def to_celsius(T, unit='C'):
    """
    'C' : degree Celsius
    'K' : Kelvin
    'F' : degree Fahrenheit
    'R' : Rankine
    """
    if unit == 'C':
        return T
    if unit == 'K':
        return T - 273.15
    if unit == 'F':
        return 5 / 9 * (T - 32)
    if unit == 'R':
        return 5 / 9 * (T - 491.67)
    raise ValueError(f"Unknown temperature unit '{unit}', expected one of 'C', 'K', 'F', 'R'")


def to_g_per_kg(S, unit='ppt'):
    """
    'ppt' : g/kg
    'ppm' : mg/kg
    'w'   : mass fraction kg/kg
    '%'   : kg/kg in parts per hundred
    """
    if unit == 'ppt':
        return S
    if unit == 'ppm':
        return S / 1000
    if unit == 'w':
        return S * 1000
    if unit == '%':
        return S * 10
    raise ValueError(f"Unknown salinity unit '{unit}', expected one of 'ppt', 'ppm', 'w', '%'")


def to_mpa(P, unit='MPa'):
    factors = {
        'MPa': 1,
        'bar': 0.1,
        'kPa': 1e-3,
        'Pa': 1e-6,
    }
    try:
        return P * factors[unit]
    except KeyError:
        raise ValueError(f"Unknown pressure unit '{unit}', expected one of {sorted(factors)}") from None
