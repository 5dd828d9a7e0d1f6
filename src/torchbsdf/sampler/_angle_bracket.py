from tensordict import tensorclass
from torch import Tensor


@tensorclass
class AngleBracket:
    """Grid interval enclosing a batch of query angles.

    Attributes
    ----------
    index : Tensor
        Lower node of the interval, int64, shape (*query_shape).
    fraction : Tensor
        Position inside ``[angles[index], angles[index + 1]]``, 0 at the
        lower node and 1 at the upper one. Queries outside the grid have a
        fraction outside [0, 1].
    """

    index: Tensor
    fraction: Tensor
