import pytest
from roomair import Quantity, Room, TerminalConfig, OutletPlacement, require_size

Q_ = Quantity


@pytest.fixture
def room() -> Room:
    return Room(
        L=Q_(8.0, 'm'),
        B=Q_(6.0, 'm'),
        H=Q_(3.2, 'm'),
        T_r=Q_(22.0, 'degC'),
        room_type='meeting_room'
    )


@pytest.fixture
def swirl() -> TerminalConfig:
    # swirl diffuser DN 400 at its reference flow rate
    return TerminalConfig(
        type_key='swirl',
        size=require_size('swirl', 2),
        V_dot=Q_(500, 'm**3 / hr')
    )


@pytest.fixture
def exhaust_swirl() -> TerminalConfig:
    return TerminalConfig(
        type_key='exhaustSwirl',
        size=require_size('exhaustSwirl', 2),
        V_dot=Q_(500, 'm**3 / hr')
    )


@pytest.fixture
def two_swirls(room, swirl) -> list[OutletPlacement]:
    return [
        OutletPlacement.create(swirl, Q_([-1.5, 3.2, 0.0], 'm'), room),
        OutletPlacement.create(swirl, Q_([1.5, 3.2, 0.0], 'm'), room)
    ]
