from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from robolab.arm import (
    apply_filter,
    clamp_velocity,
    end_effector_path,
    format_decimated_joint_states,
    format_end_effector_pose,
    format_joint_state,
    forward_kinematics,
    generate_trajectory,
    interpolate_linear,
    make_rate_limiter,
    sign,
)
from robolab.models.arm import EndEffectorPose, JointState

START = JointState(theta1=0.0, theta2=0.0)
GOAL = JointState(theta1=-math.pi, theta2=-math.pi / 6)

# ------------------------------------------------------------------
# Models
# ------------------------------------------------------------------


class TestJointState:
    def test_velocities_default_to_zero(self) -> None:
        state = JointState(theta1=0.1, theta2=0.2)
        assert state.dtheta1 == 0.0
        assert state.dtheta2 == 0.0

    def test_rejects_non_finite(self) -> None:
        with pytest.raises(ValidationError):
            JointState(theta1=math.nan, theta2=0.0)

    def test_is_frozen(self) -> None:
        with pytest.raises(ValidationError):
            START.theta1 = 1.0  # type: ignore[misc]


# ------------------------------------------------------------------
# Interpolation
# ------------------------------------------------------------------


class TestInterpolateLinear:
    def test_alpha_zero_returns_start(self) -> None:
        out = interpolate_linear(START, GOAL, 0.0)
        assert out.theta1 == START.theta1
        assert out.theta2 == START.theta2

    def test_alpha_one_returns_goal_with_full_delta(self) -> None:
        out = interpolate_linear(START, GOAL, 1.0)
        assert out.theta1 == pytest.approx(GOAL.theta1)
        assert out.theta2 == pytest.approx(GOAL.theta2)
        assert out.dtheta1 == pytest.approx(GOAL.theta1 - START.theta1)
        assert out.dtheta2 == pytest.approx(GOAL.theta2 - START.theta2)

    def test_midpoint(self) -> None:
        out = interpolate_linear(START, GOAL, 0.5)
        assert out.theta1 == pytest.approx(-math.pi / 2)
        assert out.theta2 == pytest.approx(-math.pi / 12)

    @pytest.mark.parametrize(("alpha", "expected"), [(-3.0, 0.0), (2.5, 1.0)])
    def test_alpha_is_clamped(self, alpha: float, expected: float) -> None:
        assert interpolate_linear(START, GOAL, alpha) == interpolate_linear(START, GOAL, expected)


class TestGenerateTrajectory:
    def test_includes_endpoints(self) -> None:
        traj = generate_trajectory(START, GOAL, 21)
        assert len(traj) == 21
        assert traj[0].theta1 == START.theta1
        assert traj[-1].theta1 == pytest.approx(GOAL.theta1)

    def test_two_samples_are_start_and_goal(self) -> None:
        first, last = generate_trajectory(START, GOAL, 2)
        assert first.theta2 == 0.0
        assert last.theta2 == pytest.approx(GOAL.theta2)

    @pytest.mark.parametrize("samples", [0, 1])
    def test_rejects_fewer_than_two_samples(self, samples: int) -> None:
        with pytest.raises(ValueError):
            generate_trajectory(START, GOAL, samples)


# ------------------------------------------------------------------
# Rate filter
# ------------------------------------------------------------------


def test_sign_treats_zero_as_positive() -> None:
    assert sign(-0.5) == -1.0
    assert sign(0.0) == 1.0
    assert sign(2.0) == 1.0


def test_clamp_velocity_preserves_sign() -> None:
    assert clamp_velocity(-3.0, 1.0) == -1.0
    assert clamp_velocity(0.4, 1.0) == 0.4
    assert clamp_velocity(2.0, -1.5) == 1.5


def test_rate_limiter_bounds_every_velocity() -> None:
    traj = apply_filter(generate_trajectory(START, GOAL, 21), make_rate_limiter(1.0))

    for raw, filtered in zip(generate_trajectory(START, GOAL, 21), traj):
        assert abs(filtered.dtheta1) <= 1.0
        assert abs(filtered.dtheta2) <= 1.0
        assert math.copysign(1.0, filtered.dtheta1) == math.copysign(1.0, raw.dtheta1)
        assert filtered.theta1 == raw.theta1
        assert filtered.theta2 == raw.theta2

    assert traj[0].dtheta1 == -1.0
    assert traj[0].dtheta2 == pytest.approx(-math.pi / 6)


def test_apply_filter_returns_new_list() -> None:
    traj = [START, GOAL]
    out = apply_filter(traj, lambda s: s.model_copy(update={"dtheta1": 9.0}))
    assert traj == [START, GOAL]
    assert [s.dtheta1 for s in out] == [9.0, 9.0]


# ------------------------------------------------------------------
# Forward kinematics
# ------------------------------------------------------------------


def test_fk_zero_angles_is_fully_extended() -> None:
    pose = forward_kinematics(START)
    assert pose.x == pytest.approx(0.8)
    assert pose.y == pytest.approx(0.0)


def test_fk_custom_links_and_right_angle() -> None:
    pose = forward_kinematics(JointState(theta1=math.pi / 2, theta2=-math.pi / 2), l1=2.0, l2=1.0)
    assert pose.x == pytest.approx(1.0)
    assert pose.y == pytest.approx(2.0)


def test_end_effector_path_matches_each_state() -> None:
    traj = generate_trajectory(START, GOAL, 5)
    path = end_effector_path(traj)
    assert path == [forward_kinematics(s) for s in traj]


# ------------------------------------------------------------------
# Rendering
# ------------------------------------------------------------------


def test_format_joint_state() -> None:
    text = format_joint_state(JointState(theta1=-math.pi, theta2=0.5, dtheta1=-1.0))
    assert text == "θ1 = -3.1416 rad | θ2 = 0.5000 rad | dθ1 = -1.0000 rad/s | dθ2 = 0.0000 rad/s"


def test_format_decimated_joint_states_picks_every_nth() -> None:
    lines = format_decimated_joint_states(generate_trajectory(START, GOAL, 21), 5)
    assert [line.split(" ", 1)[0] for line in lines] == ["[0]", "[5]", "[10]", "[15]", "[20]"]


def test_format_decimated_rejects_zero_step() -> None:
    with pytest.raises(ValueError):
        format_decimated_joint_states([START], 0)


def test_format_end_effector_pose() -> None:
    assert format_end_effector_pose(EndEffectorPose(x=0.8, y=-0.25)) == "x = 0.8000 m | y = -0.2500 m"


def test_interpolate_rejects_overflowing_angle_difference() -> None:
    far_start = JointState(theta1=-1e308, theta2=0.0)
    far_goal = JointState(theta1=1e308, theta2=0.0)
    with pytest.raises(ValueError, match="overflows"):
        interpolate_linear(far_start, far_goal, 0.5)
