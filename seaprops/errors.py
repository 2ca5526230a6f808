_QUANTITIES = {
    'T': ('Temperature', 'C'),
    'T0': ('Reference temperature', 'C'),
    'S': ('Salinity', 'g/kg'),
    'S0': ('Reference salinity', 'g/kg'),
    'P': ('Pressure', 'MPa'),
    'P0': ('Reference pressure', 'MPa'),
}


class DomainError(ValueError):
    """Raised when an input lies outside a correlation's validity range."""

    def __init__(self, variable, value, lower, upper, subject):
        self.variable = variable
        self.value = value
        self.lower = lower
        self.upper = upper
        self.subject = subject

        quantity, unit = _QUANTITIES.get(variable, (variable, ''))
        message = (
            f'{quantity} is out of range for {subject} function '
            f'{lower:g} <= {variable} <= {upper:g} {unit} (got {value:.12g})'
        )
        super().__init__(message)
