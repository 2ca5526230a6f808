import uncertainties as un


def with_uncertainty(func, *args):
    """
    Evaluate a property with ufloat inputs, e.g.

        with_uncertainty(SW_Density, ufloat(25, 0.1), ufloat(35, 0.5), 0.101325)

    Partial derivatives are taken numerically by uncertainties.wrap and the
    result carries linear error propagation. Plain float arguments are
    treated as exact.
    """
    return un.wrap(func)(*args)
