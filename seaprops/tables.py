import inspect
import logging

import numpy as np
import pandas as pd

from .properties.saturation import reference_pressure

logger = logging.getLogger(__name__)


def _takes_pressure(func):
    return 'P' in inspect.signature(func).parameters


def property_table(func, T, S, P=None, name=None):
    """
    Evaluate a property over every combination of T and S (and P).

    func : one of the SW_* property functions
    T, S : scalars or sequences, in degC and g/kg
    P    : None for (T, S) properties; scalar or sequence in MPa; or 'ref'
           to use the reference pressure of each (T, S) pair
    name : column name for the result, defaults to the function name
    """
    if name is None:
        name = func.__name__

    T = np.atleast_1d(T).astype(float)
    S = np.atleast_1d(S).astype(float)

    if _takes_pressure(func) and P is None:
        raise ValueError(f'{func.__name__} needs a pressure; pass P or P="ref"')

    rows = []
    if P is None:
        for t in T:
            for s in S:
                rows.append((t, s, func(t, s)))
        columns = ['T', 'S', name]
    elif isinstance(P, str) and P == 'ref':
        for t in T:
            for s in S:
                p = reference_pressure(t, s)
                rows.append((t, s, p, func(t, s, p)))
        columns = ['T', 'S', 'P', name]
    else:
        for t in T:
            for s in S:
                for p in np.atleast_1d(P).astype(float):
                    rows.append((t, s, p, func(t, s, p)))
        columns = ['T', 'S', 'P', name]

    logger.info('tabulated %s at %d states', name, len(rows))

    return pd.DataFrame(rows, columns=columns)
