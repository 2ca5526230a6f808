from ..utils import check_range
from .caloric import SW_SpcHeat
from .saturation import reference_pressure
from .transport import SW_Conductivity, SW_Viscosity
from .volumetric import SW_Density


def SW_Diffusivity(T, S):
    # thermal diffusivity in m^2/s, k / (rho cp) at the reference pressure
    check_range(T, 0, 180, 'T', 'diffusivity')
    check_range(S, 0, 150, 'S', 'diffusivity')

    P0 = reference_pressure(T, S)
    rho = SW_Density(T, S, P0)
    cp = SW_SpcHeat(T, S, P0)
    k = SW_Conductivity(T, S)

    return k / (rho * cp)


def SW_Kviscosity(T, S):
    # kinematic viscosity in m^2/s
    check_range(T, 0, 180, 'T', 'kinematic viscosity')
    check_range(S, 0, 150, 'S', 'kinematic viscosity')

    P0 = reference_pressure(T, S)
    rho = SW_Density(T, S, P0)
    mu = SW_Viscosity(T, S)

    return mu / rho


def SW_Prandtl(T, S):
    check_range(T, 0, 180, 'T', 'Prandtl')
    check_range(S, 0, 150, 'S', 'Prandtl')

    P0 = reference_pressure(T, S)
    cp = SW_SpcHeat(T, S, P0)
    mu = SW_Viscosity(T, S)
    k = SW_Conductivity(T, S)

    return cp * mu / k
