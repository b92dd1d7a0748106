import math
import numpy as np
import pytest
from roomair import Quantity, Room, Settings, TerminalConfig, compute_jet, require_size
from roomair.definitions import TerminalCategory, Mounting, SlotDirection, JetFamily
from roomair.air_jets import (
    LinearDecay,
    SqrtSlotDecay,
    evaluate,
    archimedes_number,
    detachment_point,
    sound_pressure_at_distance,
    sum_sound_levels
)
from roomair.air_jets.families import PlanarFamily, RadialFamily, get_family_model

Q_ = Quantity


class TestDecayLaws:

    def test_linear_decay_inside_core_equals_exit_velocity(self):
        law = LinearDecay(K1=1.0, U_o=2.0, d_o=0.4, x_core=2.0)
        for x in (-1.0, 0.0, 1.0, 2.0):
            assert evaluate(law, Q_(x, 'm')).to('m / s').m == pytest.approx(2.0)

    def test_linear_decay_beyond_core(self):
        law = LinearDecay(K1=1.0, U_o=2.0, d_o=0.4, x_core=2.0)
        U_x = evaluate(law, Q_([4.0, 8.0], 'm')).to('m / s').m.tolist()
        assert U_x == pytest.approx([0.2, 0.1])

    def test_slot_decay_halves_at_four_times_the_distance(self):
        law = SqrtSlotDecay(K1=1.0, U_o=2.0, b_o=0.01, x_core=0.5)
        U_1 = evaluate(law, Q_(1.0, 'm')).to('m / s').m
        U_4 = evaluate(law, Q_(4.0, 'm')).to('m / s').m
        assert U_1 == pytest.approx(0.2)
        assert U_4 == pytest.approx(0.5 * U_1)

    def test_decay_is_never_negative(self):
        law = LinearDecay(K1=1.0, U_o=2.0, d_o=0.4, x_core=2.0)
        U_x = evaluate(law, Q_(np.linspace(-5.0, 100.0, 50), 'm')).m
        assert np.all(U_x >= 0.0)

    def test_slot_decay_is_slower_than_linear_decay(self):
        linear = LinearDecay(K1=1.0, U_o=2.0, d_o=0.02, x_core=0.1)
        slot = SqrtSlotDecay(K1=1.0, U_o=2.0, b_o=0.02, x_core=0.1)
        x = Q_(np.linspace(0.2, 10.0, 50), 'm')
        U_linear = evaluate(linear, x).to('m / s').m
        U_slot = evaluate(slot, x).to('m / s').m
        assert np.all(np.diff(U_linear) < 0.0)
        assert np.all(np.diff(U_slot) < 0.0)
        assert np.all(U_slot > U_linear)
        # the gap widens with the distance
        assert np.all(np.diff(U_slot / U_linear) > 0.0)


class TestArchimedesNumber:

    def test_isothermal_below_threshold(self):
        Ar = archimedes_number(
            d_o=Q_(0.4, 'm'), U_o=Q_(2.0, 'm / s'),
            T_r=Q_(22.0, 'degC'), T_o=Q_(22.05, 'degC')
        )
        assert Ar == 0.0

    def test_cold_jet(self):
        Ar = archimedes_number(
            d_o=Q_(0.4, 'm'), U_o=Q_(2.0, 'm / s'),
            T_r=Q_(22.0, 'degC'), T_o=Q_(16.0, 'degC')
        )
        assert Ar == pytest.approx(9.81 * 6.0 * 0.4 / (295.15 * 4.0))

    def test_detachment_point_limited_to_throw(self):
        x = detachment_point(Q_(6.0, 'm'), 0.01)
        assert x.to('m').m == pytest.approx(6.0)
        x = detachment_point(Q_(6.0, 'm'), 4.0)
        assert x.to('m').m == pytest.approx(1.5)


class TestSingleJet:

    def test_swirl_at_reference_flow_rate(self, swirl, room):
        jet = compute_jet(swirl, room)
        U_o = 500 / 3600 / 0.064
        assert jet.category is TerminalCategory.SUPPLY
        assert jet.U_o.to('m / s').m == pytest.approx(U_o)
        assert jet.throw_free.to('m').m == pytest.approx(1.0 * U_o * 0.4 / 0.2)
        assert jet.x_core.to('m').m == pytest.approx(2.0)
        assert jet.L_w == pytest.approx(39.0)
        assert jet.L_p_3m == pytest.approx(39.0 - 20 * math.log10(3.0) - 8.0)
        assert jet.dp.to('Pa').m == pytest.approx(0.5 * 1.2 * U_o ** 2 * 2.0)
        assert jet.Ar == 0.0
        assert jet.x_detach is None
        # the centerline velocity at the free-jet throw equals the terminal velocity
        assert evaluate(jet.decay, jet.throw_free).to('m / s').m == pytest.approx(0.20)

    def test_coanda_throw(self, swirl, room):
        jet = compute_jet(swirl, room)
        assert jet.throw_coanda is not None
        assert jet.throw_coanda.to('m').m == pytest.approx(math.sqrt(2.0) * jet.throw_free.to('m').m)
        assert jet.throw == jet.throw_coanda

    def test_sound_power_increases_15_dB_per_doubling(self, swirl, room):
        jet_1 = compute_jet(swirl, room)
        swirl.V_dot = Q_(1000, 'm**3 / hr')
        jet_2 = compute_jet(swirl, room)
        assert jet_2.L_w - jet_1.L_w == pytest.approx(50 * math.log10(2.0))

    def test_cold_jet_detaches_within_coanda_throw(self, swirl, room):
        swirl.T_sup = Q_(16.0, 'degC')
        jet = compute_jet(swirl, room)
        assert jet.Ar > 0.01
        assert jet.x_detach is not None
        assert jet.x_detach.to('m').m <= jet.throw_coanda.to('m').m + 1.e-9

    def test_warm_jet_does_not_detach(self, swirl, room):
        swirl.T_sup = Q_(30.0, 'degC')
        jet = compute_jet(swirl, room)
        assert jet.Ar > 0.01
        assert jet.x_detach is None

    def test_custom_terminal_velocity(self, swirl, room):
        settings = Settings(V_T=Q_(0.25, 'm / s'))
        jet = compute_jet(swirl, room, settings)
        U_o = 500 / 3600 / 0.064
        assert jet.throw_free.to('m').m == pytest.approx(U_o * 0.4 / 0.25)

    def test_slot_diffuser(self, room):
        slot = TerminalConfig(
            type_key='slot',
            size=require_size('slot', 1),
            V_dot=Q_(200, 'm**3 / hr'),
            slot_direction=SlotDirection.BIDIRECTIONAL
        )
        jet = compute_jet(slot, room)
        U_o = 200 / 3600 / 0.030
        assert isinstance(jet.decay, SqrtSlotDecay)
        assert jet.U_o.to('m / s').m == pytest.approx(U_o)
        assert jet.throw_free.to('m').m == pytest.approx(0.015 * (1.2 * U_o / 0.2) ** 2)
        assert evaluate(jet.decay, jet.throw_free).to('m / s').m == pytest.approx(0.20)
        assert jet.throw_coanda is not None

    def test_vertical_slot_has_no_coanda_effect(self, room):
        slot = TerminalConfig(
            type_key='slot',
            size=require_size('slot', 1),
            V_dot=Q_(200, 'm**3 / hr'),
            slot_direction=SlotDirection.VERTICAL
        )
        jet = compute_jet(slot, room)
        assert jet.throw_coanda is None
        assert jet.throw == jet.throw_free

    def test_wall_mounted_nozzle(self, room):
        nozzle = TerminalConfig(
            type_key='nozzle',
            size=require_size('nozzle', 2),
            V_dot=Q_(250, 'm**3 / hr')
        )
        assert nozzle.mounting is Mounting.WALL
        jet = compute_jet(nozzle, room)
        assert jet.throw_coanda is None
        U_o = 250 / 3600 / 0.00785
        x = (3.2 - 1.5) / math.sin(math.radians(12.0))
        assert jet.v_occ_max.to('m / s').m == pytest.approx(1.35 * U_o * 0.1 / x)

    def test_plate_valve_has_no_coanda_effect(self, room):
        valve = TerminalConfig(
            type_key='plateValve',
            size=require_size('plateValve', 1),
            V_dot=Q_(100, 'm**3 / hr')
        )
        jet = compute_jet(valve, room)
        assert jet.throw_coanda is None
        assert jet.dp.to('Pa').m == pytest.approx(0.5 * 1.2 * jet.U_o.to('m / s').m ** 2 * 2.5)

    def test_exhaust_terminal(self, exhaust_swirl, room):
        assert exhaust_swirl.category is TerminalCategory.EXHAUST
        jet = compute_jet(exhaust_swirl, room)
        U_o = 500 / 3600 / 0.064
        assert jet.is_exhaust
        assert jet.suction_reach.to('m').m == pytest.approx(0.9 * U_o * 0.4 / 0.2)
        assert jet.v_occ_max.to('m / s').m == 0.0
        assert jet.Ar == 0.0
        assert jet.throw_coanda is None
        assert isinstance(jet.decay, LinearDecay)
        assert jet.L_w == pytest.approx(39.0)

    def test_low_ceiling_returns_exit_velocity(self, swirl):
        low_room = Room(L=Q_(4, 'm'), B=Q_(4, 'm'), H=Q_(1.7, 'm'))
        jet = compute_jet(swirl, low_room)
        assert jet.v_occ_max.to('m / s').m == pytest.approx(jet.U_o.to('m / s').m)

    def test_report(self, swirl, room):
        report = str(compute_jet(swirl, room))
        assert 'exit velocity' in report
        assert 'throw' in report


class TestFamilyDirections:

    def test_radial_jet_spreads_outward_and_downward(self):
        d = RadialFamily().direction_at(np.array([[2.0, -0.5, 0.0]]))[0]
        assert d[0] > 0.0 and d[1] < 0.0
        assert np.linalg.norm(d) == pytest.approx(1.0)

    def test_point_below_terminal_gets_vertical_direction(self):
        d = RadialFamily().direction_at(np.array([[0.0, -1.0, 0.0]]))[0]
        assert d.tolist() == pytest.approx([0.0, -1.0, 0.0])

    def test_bidirectional_slot_blows_to_both_sides(self):
        offsets = np.array([[0.0, -0.5, 1.0], [0.0, -0.5, -1.0]])
        d = PlanarFamily().direction_at(offsets, rotation=0.0, slot_direction=SlotDirection.BIDIRECTIONAL)
        assert d[0, 2] > 0.0
        assert d[1, 2] < 0.0

    @staticmethod
    def _unit(*components) -> list[float]:
        v = np.array(components, dtype=float)
        return (v / np.linalg.norm(v)).tolist()

    @pytest.mark.parametrize('family, expected', [
        (JetFamily.RADIAL, (1.0, -0.15, 0.0)),
        (JetFamily.DIRECTED, (0.5, -0.85, 0.0)),
        (JetFamily.HEMISPHERICAL, (0.4, -0.9, 0.0)),
        (JetFamily.GRILLE, (0.2, -0.95, 0.0)),
        (JetFamily.GENERIC, (2.0, -1.0, 0.0))
    ])
    def test_family_directions(self, family, expected):
        offset = np.array([[2.0, -1.0, 0.0]])
        d = get_family_model(family).direction_at(offset)[0]
        assert d.tolist() == pytest.approx(self._unit(*expected))

    def test_family_directions_follow_horizontal_offset(self):
        offset = np.array([[0.0, -1.0, -3.0]])
        d = get_family_model(JetFamily.DIRECTED).direction_at(offset)[0]
        assert d.tolist() == pytest.approx(self._unit(0.0, -0.85, -0.5))

    @pytest.mark.parametrize('slot_direction, rotation, expected', [
        (SlotDirection.VERTICAL, 0.0, (0.0, -1.0, 0.0)),
        (SlotDirection.VERTICAL, math.pi / 2, (0.0, -1.0, 0.0)),
        (SlotDirection.UNIDIRECTIONAL, 0.0, (0.0, -0.1, 1.0)),
        (SlotDirection.UNIDIRECTIONAL, math.pi / 2, (1.0, -0.1, 0.0)),
        (SlotDirection.BIDIRECTIONAL, math.pi / 2, (1.0, -0.1, 0.0))
    ])
    def test_slot_directions(self, slot_direction, rotation, expected):
        # offset on the negative side of the slot when rotated by 90°
        offset = np.array([[2.0, -1.0, 0.5]])
        d = PlanarFamily().direction_at(offset, rotation=rotation, slot_direction=slot_direction)[0]
        assert d.tolist() == pytest.approx(self._unit(*expected), abs=1.e-12)


class TestSoundHelpers:

    def test_sum_sound_levels_of_nothing_is_zero(self):
        assert sum_sound_levels([]) == 0.0

    def test_sum_of_two_equal_levels(self):
        assert sum_sound_levels([40.0, 40.0]) == pytest.approx(40.0 + 10 * math.log10(2.0))

    def test_sound_pressure_distance_is_floored(self):
        L_1 = sound_pressure_at_distance(40.0, Q_(0.01, 'm'))
        L_2 = sound_pressure_at_distance(40.0, Q_(0.1, 'm'))
        assert L_1 == pytest.approx(L_2)
        assert sound_pressure_at_distance(40.0, Q_(3.0, 'm')) < L_2
