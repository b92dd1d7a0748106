"""
SINGLE SWIRL DIFFUSER IN A MEETING ROOM

Calculate the exit velocity, throw, Coanda effect, detachment point of the cold
ceiling jet, pressure drop and sound power level of a swirl diffuser.
"""
import numpy as np
from roomair import Quantity, Room, TerminalConfig, compute_jet, require_size, evaluate

Q_ = Quantity

room = Room(
    L=Q_(8, 'm'),
    B=Q_(6, 'm'),
    H=Q_(3.2, 'm'),
    T_r=Q_(22, 'degC'),
    room_type='meeting_room'
)

# Specify:
# - type and size of the diffuser
# - supply air volume flow rate
# - supply air temperature
swirl = TerminalConfig(
    type_key='swirl',
    size=require_size('swirl', 2),
    V_dot=Q_(500, 'm**3 / hr'),
    T_sup=Q_(16, 'degC')
)

jet = compute_jet(swirl, room)
print(jet)

# Centerline velocity of the jet at some distances from the diffuser:
x = Q_(np.linspace(0.5, 6.0, 12), 'm')
U_x = evaluate(jet.decay, x)
for x_, U_x_ in zip(x, U_x):
    print(f"{x_:~P.1f}: {U_x_:~P.2f}")
