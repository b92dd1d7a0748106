"""
AIR BALANCE OF THE ROOM

Compares the total supply air flow rate with the total exhaust air flow rate
of the terminals in the room. A large difference causes an overpressure or an
underpressure in the room.
"""
from dataclasses import dataclass
from enum import StrEnum
from roomair import Quantity
from roomair.definitions import TerminalCategory
from roomair.air_jets import TerminalConfig

Q_ = Quantity


class BalanceStatus(StrEnum):
    OK = 'ok'
    WARNING = 'warning'
    CRITICAL = 'critical'


@dataclass
class AirBalance:
    """Air balance of the room.

    Attributes
    ----------
    V_dot_sup:
        Total supply air flow rate.
    V_dot_exh:
        Total exhaust air flow rate.
    imbalance:
        Absolute difference between supply and exhaust air flow rate relative
        to their mean value.
    status:
        OK if the imbalance is not more than 5 %, WARNING if it is not more
        than 10 %, else CRITICAL.
    """
    V_dot_sup: Quantity
    V_dot_exh: Quantity
    imbalance: Quantity
    status: BalanceStatus

    def __str__(self) -> str:
        out = [
            f"supply air flow rate: {self.V_dot_sup.to('m**3 / hr'):~P.0f}",
            f"exhaust air flow rate: {self.V_dot_exh.to('m**3 / hr'):~P.0f}",
            f"imbalance: {self.imbalance.to('pct'):~P.0f} ({self.status})"
        ]
        return '\n'.join(out)


def air_balance(
    terminals: list[TerminalConfig],
    warning_limit: Quantity = Q_(5, 'pct'),
    critical_limit: Quantity = Q_(10, 'pct')
) -> AirBalance:
    """Returns the air balance of the given supply and exhaust terminals.
    Without any air flow the imbalance is zero.
    """
    V_dot_sup = sum(
        (t.V_dot.to('m**3 / hr').m for t in terminals if t.category is not TerminalCategory.EXHAUST),
        start=0.0
    )
    V_dot_exh = sum(
        (t.V_dot.to('m**3 / hr').m for t in terminals if t.category is TerminalCategory.EXHAUST),
        start=0.0
    )
    V_dot_avg = (V_dot_sup + V_dot_exh) / 2
    if V_dot_avg > 0.0:
        imbalance = Q_(abs(V_dot_sup - V_dot_exh) / V_dot_avg * 100, 'pct')
    else:
        imbalance = Q_(0.0, 'pct')
    if imbalance > critical_limit:
        status = BalanceStatus.CRITICAL
    elif imbalance > warning_limit:
        status = BalanceStatus.WARNING
    else:
        status = BalanceStatus.OK
    return AirBalance(
        V_dot_sup=Q_(V_dot_sup, 'm**3 / hr'),
        V_dot_exh=Q_(V_dot_exh, 'm**3 / hr'),
        imbalance=imbalance,
        status=status
    )
