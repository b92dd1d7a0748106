"""
AIR BALANCE AND RESULTS TABLE

Compare the supply and exhaust air flow rates of a room with a slot diffuser,
a DQJ ceiling diffuser and two exhaust plate valves.
"""
import pandas as pd
from roomair import (
    Quantity,
    Room,
    TerminalConfig,
    OutletPlacement,
    require_size,
    air_balance,
    jet_results_table
)
from roomair.definitions import SlotDirection

Q_ = Quantity

pd.set_option('display.max_columns', None)
pd.set_option('display.width', 200)

room = Room(L=Q_(10, 'm'), B=Q_(5, 'm'), H=Q_(3.0, 'm'), room_type='open_office')

terminals = {
    'slot': TerminalConfig(
        type_key='slot',
        size=require_size('slot', 1),
        V_dot=Q_(250, 'm**3 / hr'),
        T_sup=Q_(17, 'degC'),
        slot_direction=SlotDirection.BIDIRECTIONAL,
        slot_length=Q_(1.5, 'm')
    ),
    'dqj': TerminalConfig(
        type_key='dqjSupply',
        size=require_size('dqjSupply', 1),
        V_dot=Q_(400, 'm**3 / hr'),
        T_sup=Q_(17, 'degC')
    ),
    'valve': TerminalConfig(
        type_key='exhaustPlateValve',
        size=require_size('exhaustPlateValve', 3),
        V_dot=Q_(300, 'm**3 / hr')
    )
}

placements = [
    OutletPlacement.create(terminals['slot'], Q_([-3.0, 3.0, 0.0], 'm'), room),
    OutletPlacement.create(terminals['dqj'], Q_([2.0, 3.0, 0.0], 'm'), room),
    OutletPlacement.create(terminals['valve'], Q_([4.0, 3.0, -2.0], 'm'), room),
    OutletPlacement.create(terminals['valve'], Q_([4.0, 3.0, 2.0], 'm'), room)
]

balance = air_balance([
    terminals['slot'],
    terminals['dqj'],
    terminals['valve'],
    terminals['valve']
])
print(balance)

print(jet_results_table(placements))
