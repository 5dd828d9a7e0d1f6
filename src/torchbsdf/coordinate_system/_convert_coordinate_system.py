from typing import Type, Union

from torch import Tensor

from ._coordinate_system import Angles, CoordinateSystem


def convert_coordinate_system(
    source: Type[CoordinateSystem],
    destination: Type[CoordinateSystem],
    angle0: Union[Tensor, float],
    angle1: Union[Tensor, float],
    angle2: Union[Tensor, float],
    angle3: Union[Tensor, float],
) -> Angles:
    """Convert angles of one coordinate system to another.

    Equivalent to ``destination.from_xyz(*source.to_xyz(...))``.

    Parameters
    ----------
    source : type of CoordinateSystem
        System the angles are expressed in.
    destination : type of CoordinateSystem
        System to convert to.
    angle0, angle1, angle2, angle3 : Tensor or float
        Source angles, broadcast against each other.

    Returns
    -------
    tuple of Tensor
        The four destination angles.
    """
    in_dir, out_dir = source.to_xyz(angle0, angle1, angle2, angle3)

    return destination.from_xyz(in_dir, out_dir)
