"""Joint-space trajectory generation and rate limiting."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable

from robolab._constants import NUM_TRAJECTORY_SAMPLES, VELOCITY_LIMIT_RAD_S
from robolab.models.arm import JointState

_logger = logging.getLogger(__name__)

JointFilter = Callable[[JointState], JointState]


def sign(x: float) -> float:
    """Return ``-1.0`` for negative *x* and ``1.0`` otherwise (zero included)."""
    return -1.0 if x < 0 else 1.0


def interpolate_linear(start: JointState, goal: JointState, alpha: float) -> JointState:
    """Linearly interpolate joint angles between *start* and *goal*.

    *alpha* is clamped to ``[0, 1]``; ``0`` is the start and ``1`` the goal.
    Both velocities are set to the full angle still to be covered between
    start and goal. :func:`make_rate_limiter` brings them under the joint
    speed limit afterwards.

    Raises :class:`ValueError` if the angle difference between *start* and
    *goal* is not a finite number.
    """
    alpha = min(max(alpha, 0.0), 1.0)

    d_theta1 = goal.theta1 - start.theta1
    d_theta2 = goal.theta2 - start.theta2
    if not (math.isfinite(d_theta1) and math.isfinite(d_theta2)):
        raise ValueError(f"joint angle difference overflows: ({d_theta1}, {d_theta2})")

    return JointState(
        theta1=start.theta1 + alpha * d_theta1,
        theta2=start.theta2 + alpha * d_theta2,
        dtheta1=d_theta1,
        dtheta2=d_theta2,
    )


def generate_trajectory(
    start: JointState,
    goal: JointState,
    num_samples: int = NUM_TRAJECTORY_SAMPLES,
) -> list[JointState]:
    """Sample *num_samples* evenly spaced states from *start* to *goal*, endpoints included.

    Raises :class:`ValueError` if *num_samples* is less than 2.
    """
    if num_samples < 2:
        raise ValueError(f"num_samples must be at least 2, got {num_samples}")
    step = 1.0 / (num_samples - 1)
    trajectory = [interpolate_linear(start, goal, i * step) for i in range(num_samples)]
    _logger.debug("Generated %d trajectory samples", len(trajectory))
    return trajectory


def clamp_velocity(value: float, limit: float) -> float:
    """Clamp the magnitude of *value* to ``|limit|``, keeping its sign."""
    return sign(value) * min(abs(value), abs(limit))


def make_rate_limiter(limit: float = VELOCITY_LIMIT_RAD_S) -> JointFilter:
    """Return a filter that clamps both joint velocities to ``|limit|`` rad/s.

    Angles pass through unchanged.
    """

    def _limit(state: JointState) -> JointState:
        return state.model_copy(
            update={
                "dtheta1": clamp_velocity(state.dtheta1, limit),
                "dtheta2": clamp_velocity(state.dtheta2, limit),
            }
        )

    return _limit


def apply_filter(trajectory: Iterable[JointState], joint_filter: JointFilter) -> list[JointState]:
    """Apply *joint_filter* pointwise and return the filtered trajectory."""
    return [joint_filter(state) for state in trajectory]
