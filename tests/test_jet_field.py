import math
import numpy as np
import pytest
from roomair import (
    Quantity,
    OutletPlacement,
    velocity_field,
    velocity_vector_at,
    velocity_magnitude_at,
    evaluate
)

Q_ = Quantity


class TestVelocityField:

    def test_no_terminals_no_velocity(self):
        v, v_mag = velocity_vector_at(Q_([0.0, 1.0, 0.0], 'm'), [])
        assert v.to('m / s').m.tolist() == [0.0, 0.0, 0.0]
        assert v_mag.to('m / s').m == 0.0

    def test_supply_below_terminal_points_down(self, room, swirl):
        placement = OutletPlacement.create(swirl, Q_([0.0, 3.2, 0.0], 'm'), room)
        v, v_mag = velocity_vector_at(Q_([0.0, 2.0, 0.0], 'm'), [placement])
        U_o = placement.jet.U_o.to('m / s').m
        # the point lies within the core of the jet
        assert v.to('m / s').m.tolist() == pytest.approx([0.0, -U_o, 0.0])
        assert v_mag.to('m / s').m == pytest.approx(U_o)

    def test_exhaust_is_a_sink(self, room, exhaust_swirl):
        placement = OutletPlacement.create(exhaust_swirl, Q_([0.0, 3.2, 0.0], 'm'), room)
        v, _ = velocity_vector_at(Q_([0.0, 2.0, 0.0], 'm'), [placement])
        assert v.to('m / s').m[1] > 0.0

    def test_point_at_terminal_is_skipped(self, room, swirl):
        placement = OutletPlacement.create(swirl, Q_([0.0, 3.2, 0.0], 'm'), room)
        v_mag = velocity_magnitude_at(Q_([0.0, 3.2, 0.0], 'm'), [placement])
        assert v_mag.to('m / s').m == 0.0

    def test_symmetric_terminals_cancel_horizontally(self, two_swirls):
        v, _ = velocity_vector_at(Q_([0.0, 1.0, 0.0], 'm'), two_swirls)
        vx, vy, vz = v.to('m / s').m
        assert abs(vx) < 1.e-12
        assert abs(vz) < 1.e-12
        assert vy <= 0.0

    def test_superposition_is_the_sum_of_single_fields(self, two_swirls):
        point = Q_([0.7, 1.5, -0.4], 'm')
        v_1, _ = velocity_vector_at(point, two_swirls[:1])
        v_2, _ = velocity_vector_at(point, two_swirls[1:])
        v_12, _ = velocity_vector_at(point, two_swirls)
        assert v_12.m.tolist() == pytest.approx((v_1.m + v_2.m).tolist())

    def test_vectorized_field_matches_single_points(self, two_swirls):
        points = Q_(np.array([
            [0.0, 1.0, 0.0],
            [2.0, 1.8, 1.0],
            [-3.0, 0.1, -2.5]
        ]), 'm')
        v = velocity_field(points, two_swirls).to('m / s').m
        assert v.shape == (3, 3)
        for i in range(3):
            v_i, _ = velocity_vector_at(points[i], two_swirls)
            assert v[i].tolist() == pytest.approx(v_i.to('m / s').m.tolist())

    def test_placement_properties(self, two_swirls):
        placement = two_swirls[0]
        assert placement.type_key == 'swirl'
        assert placement.is_supply
        assert placement.L_w == pytest.approx(39.0)

    def test_vertical_profile_below_ceiling_jet(self, room, swirl):
        placement = OutletPlacement.create(swirl, Q_([0.0, 3.2, 0.0], 'm'), room)
        dx, dy = 2.0, -0.3
        h = abs(dx)
        r = math.hypot(dx, dy)
        U_r = evaluate(placement.jet.decay, Q_(r, 'm')).to('m / s').m
        sigma = 0.12 * h
        speed = U_r * math.exp(-dy ** 2 / (2 * sigma ** 2))
        direction = np.array([1.0, -0.15, 0.0])
        expected = speed * direction / np.linalg.norm(direction)
        v, v_mag = velocity_vector_at(Q_([dx, 3.2 + dy, 0.0], 'm'), [placement])
        assert v.to('m / s').m.tolist() == pytest.approx(expected.tolist())
        assert v_mag.to('m / s').m == pytest.approx(speed)

    def test_exhaust_has_no_vertical_profile(self, room, exhaust_swirl):
        placement = OutletPlacement.create(exhaust_swirl, Q_([0.0, 3.2, 0.0], 'm'), room)
        point = np.array([2.0, 2.9, 0.0])
        r = np.linalg.norm(point - np.array([0.0, 3.2, 0.0]))
        U_r = evaluate(placement.jet.decay, Q_(r, 'm')).to('m / s').m
        v_mag = velocity_magnitude_at(Q_(point, 'm'), [placement])
        assert v_mag.to('m / s').m == pytest.approx(U_r)

    def test_negligible_contribution_is_dropped(self, room, swirl):
        placement = OutletPlacement.create(swirl, Q_([0.0, 3.2, 0.0], 'm'), room)
        # far below the ceiling jet the gaussian profile leaves far less
        # than 1 mm/s
        v, v_mag = velocity_vector_at(Q_([3.9, 0.1, 0.0], 'm'), [placement])
        assert v.to('m / s').m.tolist() == [0.0, 0.0, 0.0]
        assert v_mag.to('m / s').m == 0.0

    def test_contribution_above_threshold_is_kept(self, room, swirl):
        placement = OutletPlacement.create(swirl, Q_([0.0, 3.2, 0.0], 'm'), room)
        # at 1.0 m horizontal distance and 0.2 m below the ceiling the
        # profile factor is exp(-0.04 / (2 * 0.0144)), well above the threshold
        v_mag = velocity_magnitude_at(Q_([1.0, 3.0, 0.0], 'm'), [placement])
        U_o = placement.jet.U_o.to('m / s').m
        assert v_mag.to('m / s').m == pytest.approx(U_o * math.exp(-0.04 / (2 * 0.12 ** 2)))
