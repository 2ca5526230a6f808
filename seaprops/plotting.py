import logging

import numpy as np
import matplotlib.pyplot as plt

from .properties.saturation import reference_pressure

logger = logging.getLogger(__name__)

UNITS = {
    'SW_BPE': 'K',
    'SW_ChemPot_s': 'J/kg',
    'SW_ChemPot_w': 'J/kg',
    'SW_Conductivity': 'W/m K',
    'SW_ConductivityP': 'W/m K',
    'SW_Density': 'kg/m^3',
    'SW_Diffusivity': 'm^2/s',
    'SW_Enthalpy': 'J/kg',
    'SW_Entropy': 'J/kg K',
    'SW_FlowExergy': 'J/kg',
    'SW_Gibbs': 'J/kg',
    'SW_IntEnergy': 'J/kg',
    'SW_IsobExp': '1/K',
    'SW_IsothComp': '1/MPa',
    'SW_Kviscosity': 'm^2/s',
    'SW_LatentHeat': 'J/kg',
    'SW_OsmCoeff': '-',
    'SW_OsmPress': 'MPa',
    'SW_Prandtl': '-',
    'SW_Psat': 'N/m^2',
    'SW_SpcHeat': 'J/kg K',
    'SW_SurfaceTension': 'mN/m',
    'SW_Viscosity': 'kg/m s',
    'SW_Volume': 'm^3/kg',
}


def plot_property(func, T, salinities, P=None, ax=None):
    """
    Plot a property against temperature, one line per salinity.

    P is None for (T, S) properties, a pressure in MPa, or 'ref' for the
    reference pressure at each point.
    """
    if ax is None:
        fig, ax = plt.subplots(constrained_layout=True)
    else:
        fig = ax.figure

    T = np.asarray(T, dtype=float)

    for i, s in enumerate(salinities):
        if P is None:
            y = [func(t, s) for t in T]
        elif isinstance(P, str) and P == 'ref':
            y = [func(t, s, reference_pressure(t, s)) for t in T]
        else:
            y = [func(t, s, P) for t in T]
        ax.plot(T, y, f'C{i}', label=f'S = {s:g} g/kg')
        logger.debug('plotted %s at S=%g over %d points', func.__name__, s, T.size)

    ax.set_xlabel('T [C]')
    ax.set_ylabel(f'{func.__name__} [{UNITS.get(func.__name__, "-")}]')
    ax.legend()

    return fig, ax
