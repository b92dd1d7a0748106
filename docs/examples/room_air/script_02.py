"""
COMFORT EVALUATION OF A ROOM WITH TWO SWIRL DIFFUSERS AND AN EXHAUST GRILLE

- superposed velocity field in the occupied zone
- draught rate and comfort category
- sound pressure level heatmap at listener height
"""
from roomair import (
    Quantity,
    Room,
    TerminalConfig,
    OutletPlacement,
    require_size,
    evaluate_comfort,
    get_comfort_summary,
    generate_sound_heatmap,
    generate_velocity_heatmap
)
from roomair.logging import ModuleLogger

Q_ = Quantity

# Show how the comfort evaluation finds the worst-case velocity:
ModuleLogger.set_level(ModuleLogger.DEBUG, 'roomair.comfort')

room = Room(
    L=Q_(8, 'm'),
    B=Q_(6, 'm'),
    H=Q_(3.2, 'm'),
    T_r=Q_(24, 'degC'),
    room_type='office'
)

swirl = TerminalConfig(
    type_key='swirl',
    size=require_size('swirl', 1),
    V_dot=Q_(300, 'm**3 / hr'),
    T_sup=Q_(18, 'degC')
)
grille = TerminalConfig(
    type_key='ceilingGrille',
    size=require_size('ceilingGrille', 1),
    V_dot=Q_(600, 'm**3 / hr')
)

placements = [
    OutletPlacement.create(swirl, Q_([-2.0, 3.2, 0.0], 'm'), room),
    OutletPlacement.create(swirl, Q_([2.0, 3.2, 0.0], 'm'), room),
    OutletPlacement.create(grille, Q_([0.0, 3.2, 2.5], 'm'), room)
]

result = evaluate_comfort(placements, room)
print(result)
summary = get_comfort_summary(result, lang='en')
print(summary['category_label'])
for recommendation in summary['recommendations']:
    print(f"- {recommendation}")

sound_map = generate_sound_heatmap(placements, room)
print(sound_map.to_frame().round(1))

velocity_map = generate_velocity_heatmap(placements, room, height=Q_(1.8, 'm'))
print(velocity_map.to_frame().round(3))
