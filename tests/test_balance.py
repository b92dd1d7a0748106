import pytest
from roomair import (
    Quantity,
    TerminalConfig,
    OutletPlacement,
    require_size,
    air_balance,
    BalanceStatus,
    jet_results_table
)

Q_ = Quantity


def _terminals(V_dot_sup: float, V_dot_exh: float) -> list[TerminalConfig]:
    return [
        TerminalConfig('swirl', require_size('swirl', 2), Q_(V_dot_sup, 'm**3 / hr')),
        TerminalConfig('exhaustSwirl', require_size('exhaustSwirl', 2), Q_(V_dot_exh, 'm**3 / hr'))
    ]


class TestAirBalance:

    def test_balanced(self):
        balance = air_balance(_terminals(500, 480))
        assert balance.imbalance.to('pct').m == pytest.approx(20 / 490 * 100)
        assert balance.status is BalanceStatus.OK

    def test_warning(self):
        balance = air_balance(_terminals(500, 460))
        assert balance.status is BalanceStatus.WARNING

    def test_critical(self):
        balance = air_balance(_terminals(500, 450))
        assert balance.status is BalanceStatus.CRITICAL

    def test_totals(self):
        balance = air_balance(_terminals(500, 450) + _terminals(300, 0))
        assert balance.V_dot_sup.to('m**3 / hr').m == pytest.approx(800)
        assert balance.V_dot_exh.to('m**3 / hr').m == pytest.approx(450)

    def test_no_air_flow(self):
        balance = air_balance([])
        assert balance.imbalance.to('pct').m == 0.0
        assert balance.status is BalanceStatus.OK


class TestResultsTable:

    def test_one_row_per_terminal(self, room, two_swirls, exhaust_swirl):
        exhaust = OutletPlacement.create(exhaust_swirl, Q_([0.0, 3.2, 2.0], 'm'), room)
        df = jet_results_table(two_swirls + [exhaust])
        assert len(df.index) == 3
        assert list(df['category']) == ['supply', 'supply', 'exhaust']
        assert df.loc[1, 'L_w [dB(A)]'] == pytest.approx(39.0)
        assert df.loc[1, 'V_dot [m³/h]'] == pytest.approx(500.0)

    def test_empty(self):
        assert jet_results_table([]).empty
