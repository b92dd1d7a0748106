"""
Tabulated results of the terminals in a room.
"""
import pandas as pd
from roomair.jet_field import OutletPlacement


def jet_results_table(placements: list[OutletPlacement]) -> pd.DataFrame:
    """Returns a DataFrame with one row per terminal. For exhaust terminals
    the column 'throw [m]' holds the suction reach.
    """
    rows = []
    for i, p in enumerate(placements, start=1):
        jet = p.jet
        rows.append({
            'terminal': i,
            'type': p.type_key,
            'category': str(p.category),
            'V_dot [m³/h]': round((jet.U_o * jet.A_eff).to('m**3 / hr').m, 0),
            'U_o [m/s]': round(jet.U_o.to('m / s').m, 2),
            'throw [m]': round(jet.throw.to('m').m, 2),
            'dp [Pa]': round(jet.dp.to('Pa').m, 1),
            'L_w [dB(A)]': round(jet.L_w, 1),
            'L_p,3m [dB(A)]': round(jet.L_p_3m, 1),
            'v_occ [m/s]': round(jet.v_occ_max.to('m / s').m, 3)
        })
    df = pd.DataFrame(rows)
    if not df.empty:
        df.set_index('terminal', inplace=True)
    return df
