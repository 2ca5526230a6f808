# reference pressure for T below the normal boiling point [MPa]
P_ATM = 0.101325
T_BOIL = 100.0

# upper pressure bound shared by the pressure-dependent fits [MPa]
P_MAX = 12.0

# default dead state for flow exergy
T0_DEAD = 25.0
S0_DEAD = 35.0
P0_DEAD = P_ATM
S0_MIN = 0.1
S0_MAX = 120.0

# physical constants
KELVIN = 273.15
R_GAS = 8.3144598       # J/mol-K
MW_SALT = 31.4038218    # weighted mean molar mass of sea salt [g/mol]
