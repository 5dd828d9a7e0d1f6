"""Uniform and centripetal Catmull-Rom kernels over four control values."""

from typing import Tuple, Union

import torch
from torch import Tensor

from ._as_floating_tensors import as_floating_tensors

_BISECTION_ITERATIONS = 48

_COINCIDENT_EPSILON = 1e-8


def catmull_rom_spline(
    v0: Union[Tensor, float],
    v1: Union[Tensor, float],
    v2: Union[Tensor, float],
    v3: Union[Tensor, float],
    t: Union[Tensor, float],
) -> Tensor:
    r"""Evaluate a uniform Catmull-Rom segment between ``v1`` and ``v2``.

    .. math::
        p(t) = \frac{1}{2}\left(2 v_1 + (v_2 - v_0) t
            + (2 v_0 - 5 v_1 + 4 v_2 - v_3) t^2
            + (3 v_1 - v_0 - 3 v_2 + v_3) t^3\right)

    Parameters
    ----------
    v0, v1, v2, v3 : Tensor or float
        Control values at equally spaced positions.
    t : Tensor or float
        Position inside the segment, 0 at ``v1`` and 1 at ``v2``.

    Returns
    -------
    Tensor
        Interpolated values. ``t == 0`` and ``t == 1`` return ``v1`` and
        ``v2`` exactly.
    """
    v0, v1, v2, v3, t = as_floating_tensors(v0, v1, v2, v3, t)

    t2 = t * t
    t3 = t2 * t

    result = 0.5 * (
        2.0 * v1
        + (v2 - v0) * t
        + (2.0 * v0 - 5.0 * v1 + 4.0 * v2 - v3) * t2
        + (3.0 * v1 - v0 - 3.0 * v2 + v3) * t3
    )

    return torch.where(t == 0.0, v1, torch.where(t == 1.0, v2, result))


def _knot_interval(
    pa: Tensor,
    va: Tensor,
    pb: Tensor,
    vb: Tensor,
) -> Tensor:
    # |P_b - P_a| ** 0.5 with unit intervals for coincident points
    interval = torch.sqrt(torch.sqrt((pb - pa) ** 2 + (vb - va) ** 2))

    return torch.where(
        interval < _COINCIDENT_EPSILON, torch.ones_like(interval), interval
    )


def _barry_goldman(
    knots: Tuple[Tensor, Tensor, Tensor, Tensor],
    points: Tuple[Tensor, Tensor, Tensor, Tensor],
    s: Tensor,
) -> Tensor:
    t0, t1, t2, t3 = knots
    p0, p1, p2, p3 = points

    a1 = (t1 - s) / (t1 - t0) * p0 + (s - t0) / (t1 - t0) * p1
    a2 = (t2 - s) / (t2 - t1) * p1 + (s - t1) / (t2 - t1) * p2
    a3 = (t3 - s) / (t3 - t2) * p2 + (s - t2) / (t3 - t2) * p3

    b1 = (t2 - s) / (t2 - t0) * a1 + (s - t0) / (t2 - t0) * a2
    b2 = (t3 - s) / (t3 - t1) * a2 + (s - t1) / (t3 - t1) * a3

    return (t2 - s) / (t2 - t1) * b1 + (s - t1) / (t2 - t1) * b2


def centripetal_catmull_rom_spline(
    p0: Union[Tensor, float],
    p1: Union[Tensor, float],
    p2: Union[Tensor, float],
    p3: Union[Tensor, float],
    v0: Union[Tensor, float],
    v1: Union[Tensor, float],
    v2: Union[Tensor, float],
    v3: Union[Tensor, float],
    x: Union[Tensor, float],
) -> Tensor:
    r"""Evaluate a centripetal Catmull-Rom curve at an abscissa.

    The control points :math:`P_i = (p_i, v_i)` define a planar curve
    parameterized with centripetal knots
    :math:`t_{i+1} = t_i + |P_{i+1} - P_i|^{1/2}`. The knot parameter
    :math:`s \in [t_1, t_2]` whose abscissa equals ``x`` is found by
    bisection and the ordinate of the curve at :math:`s` is returned.

    Parameters
    ----------
    p0, p1, p2, p3 : Tensor or float
        Strictly increasing control abscissae (for example grid angles).
    v0, v1, v2, v3 : Tensor or float
        Control values.
    x : Tensor or float
        Query abscissae in [p1, p2]. Values outside are clamped to the
        segment.

    Returns
    -------
    Tensor
        Interpolated values, broadcast over all inputs. ``x == p1`` and
        ``x == p2`` return ``v1`` and ``v2`` exactly.

    Notes
    -----
    Unlike the uniform variant the centripetal parameterization neither
    forms cusps nor loops, which keeps the overshoot bounded when the
    control abscissae are unevenly spaced.

    References
    ----------
    .. [1] Barry, P.J. and Goldman, R.N. "A Recursive Evaluation Algorithm
           for a Class of Catmull-Rom Splines", SIGGRAPH 1988.
    .. [2] Yuksel, C., Schaefer, S. and Keyser, J. "Parameterization and
           applications of Catmull-Rom curves", Computer-Aided Design, 2011.
    """
    p0, p1, p2, p3, v0, v1, v2, v3, x = torch.broadcast_tensors(
        *as_floating_tensors(p0, p1, p2, p3, v0, v1, v2, v3, x)
    )

    t0 = torch.zeros_like(x)
    t1 = t0 + _knot_interval(p0, v0, p1, v1)
    t2 = t1 + _knot_interval(p1, v1, p2, v2)
    t3 = t2 + _knot_interval(p2, v2, p3, v3)
    knots = (t0, t1, t2, t3)

    # Bisection on the abscissa in knot space
    positions = (p0, p1, p2, p3)
    lower = t1
    upper = t2
    for _ in range(_BISECTION_ITERATIONS):
        middle = 0.5 * (lower + upper)
        below = _barry_goldman(knots, positions, middle) < x
        lower = torch.where(below, middle, lower)
        upper = torch.where(below, upper, middle)

    s = 0.5 * (lower + upper)
    result = _barry_goldman(knots, (v0, v1, v2, v3), s)

    return torch.where(x == p1, v1, torch.where(x == p2, v2, result))
