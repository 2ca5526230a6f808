import numpy as np

from ..config import MW_SALT, R_GAS
from ..utils import check_range
from .caloric import SW_Gibbs
from .saturation import check_pressure, reference_pressure
from .volumetric import SW_Density


def _check_elevated_pressure(T, S, P, P0, S_min, subject):
    # above P0 the pressure term of dg/dS was only fitted for 10-40 C, S_min-42 g/kg
    if P > P0:
        check_range(S, S_min, 42, 'S', subject)
        check_range(T, 10, 40, 'T', subject)


def SW_ChemPot_w(T, S, P):
    # chemical potential of water in seawater in J/kg, mu_w = g - S dg/dS
    check_range(T, 10, 80, 'T', 'chemical potential of water')
    check_range(S, 0, 120, 'S', 'chemical potential of water')
    check_pressure(T, S, P, 'chemical potential of water')

    P0 = reference_pressure(T, S)
    _check_elevated_pressure(T, S, P, P0, 0, 'chemical potential of water')

    b1 = -2.4176e2
    b2 = -6.2462e-1
    b3 = 7.4761e-3
    b4 = 1.3836e-3
    b5 = -6.7157e-6
    b6 = 5.1993e-4
    b7 = 9.9176e-9
    b8 = 6.6448e1
    b9 = 2.0681e-1

    c5 = -7.2431e-1
    c6 = 1.5712e-3
    c7 = -1.8919e-5
    c8 = 2.5939e-8

    if S > 0:
        dg_dS_P0 = (
            b1 + b2 * T + b3 * T**2 +
            2 * b4 * S * T + 2 * b5 * S * T**2 +
            3 * b6 * S**2 + 3 * b7 * S**2 * T**2 +
            b8 * (np.log(S) + 1) + b9 * T * (np.log(S) + 1)
        )
        dg_dS_P = (P - P0) * (c5 + c6 * T + c7 * T**2 + c8 * T**3)
        S_dg_dS = S * (dg_dS_P0 + dg_dS_P)
    else:
        S_dg_dS = 0

    return SW_Gibbs(T, S, P) - S_dg_dS


def SW_ChemPot_s(T, S, P):
    # chemical potential of salt in seawater in J/kg, mu_s = g + (1000 - S) dg/dS
    check_range(T, 10, 80, 'T', 'chemical potential of salt')
    check_range(S, 0.1, 120, 'S', 'chemical potential of salt')
    check_pressure(T, S, P, 'chemical potential of salt')

    P0 = reference_pressure(T, S)
    _check_elevated_pressure(T, S, P, P0, 0.1, 'chemical potential of salt')

    b1 = -2.4176e2
    b2 = -6.2462e-1
    b3 = 7.4761e-3
    b4 = 1.3836e-3
    b5 = -6.7157e-6
    b6 = 5.1993e-4
    b7 = 9.9176e-9
    b8 = 6.6448e1
    b9 = 2.0681e-1

    dg_dS_P0 = (
        b1 + b2 * T + b3 * T**2 +
        2 * b4 * S * T + 2 * b5 * S * T**2 +
        3 * b6 * S**2 + 3 * b7 * S**2 * T**2 +
        b8 * (np.log(S) + 1) + b9 * T * (np.log(S) + 1)
    )

    c5 = -7.2431e-1
    c6 = 1.5712e-3
    c7 = -1.8919e-5
    c8 = 2.5939e-8

    dg_dS_P = (P - P0) * (c5 + c6 * T + c7 * T**2 + c8 * T**3)
    dg_dS = dg_dS_P0 + dg_dS_P

    return SW_Gibbs(T, S, P) + (1000 - S) * dg_dS


def _osm_coeff_polynomial(T, S):
    a1 = 0.89453233003
    a2 = 0.00041560737424
    a3 = -0.0000046262121398
    a4 = 0.000000000022211195897
    a5 = -0.00011445456438
    a6 = -0.0000014783462366
    a7 = -0.000000000013526263499
    a8 = 0.0000070132355546
    a9 = 0.000000056960486681
    a10 = -0.00000000028624032584

    phi = (
        a1 + a2 * T + a3 * T**2 + a4 * T**4 +
        a5 * S + a6 * T * S + a7 * S * T**3 +
        a8 * S**2 + a9 * S**2 * T + a10 * S**2 * T**2
    )
    dphi_dS = (
        a5 + a6 * T + a7 * T**3 +
        2 * a8 * S + 2 * a9 * S * T + 2 * a10 * S * T**2
    )
    return phi, dphi_dS


def _molality(S):
    # total molality of the dissolved salts in mol/kg of water
    return S / (1000 - S) * (1000 / MW_SALT)


def _osm_coeff_pitzer(T, S, S_eq=10):
    # Pitzer-Bronsted form 1 - beta m^0.5 + lambda m, matched in value and
    # slope to the polynomial at S_eq
    phi_eq, dphi_eq = _osm_coeff_polynomial(T, S_eq)

    m_eq = _molality(S_eq)
    dm_dS_eq = (1000 / MW_SALT) * (1 / (1000 - S_eq) + S_eq / (1000 - S_eq)**2)

    beta = -2 * (m_eq**-0.5 * (phi_eq - 1) - dphi_eq * m_eq**0.5 / dm_dS_eq)
    lam = (phi_eq + beta * m_eq**0.5 - 1) / m_eq

    m = _molality(S)
    return 1 - beta * m**0.5 + lam * m


def SW_OsmCoeff(T, S):
    # osmotic coefficient of seawater from Sharqawy et al., 2010,
    # with a Pitzer-Bronsted extrapolation to pure water below 10 g/kg
    check_range(T, 0, 120, 'T', 'osmotic coefficient')
    check_range(S, 0, 120, 'S', 'osmotic coefficient')

    if S <= 10:
        return _osm_coeff_pitzer(T, S)

    phi, _ = _osm_coeff_polynomial(T, S)
    return phi


def SW_OsmPress(T, S):
    # osmotic pressure in MPa, Pi = phi m R T rho_w
    check_range(T, 0, 120, 'T', 'osmotic pressure')
    check_range(S, 0, 120, 'S', 'osmotic pressure')

    phi = SW_OsmCoeff(T, S)
    T_K = T + 273.15
    m_sum = _molality(S)

    P0 = reference_pressure(T, 0)
    rho_w = SW_Density(T, 0, P0)

    Pi = phi * m_sum * R_GAS * T_K * rho_w
    return Pi / 1e6
