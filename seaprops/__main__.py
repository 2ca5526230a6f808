from .properties.caloric import SW_Enthalpy
from .properties.volumetric import SW_Density

T = 25   # C
S = 35   # g/kg
P = 0.1  # MPa

print(f'Density: {SW_Density(T, S, P)} kg/m^3')
print(f'Enthalpy: {SW_Enthalpy(T, S, P)} J/kg')
