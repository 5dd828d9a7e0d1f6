import torch

from torchbsdf.coordinate_system import (
    HalfDifferenceCoordinateSystem,
    SpecularCoordinateSystem,
    SphericalCoordinateSystem,
    convert_coordinate_system,
)


class TestConvertCoordinateSystem:
    """Tests for angle conversion between coordinate systems."""

    def test_same_system_is_identity(self):
        """Converting to the same system returns the input angles."""
        angles = [
            torch.tensor([0.3, 0.9], dtype=torch.float64),
            torch.tensor([1.0, 4.0], dtype=torch.float64),
            torch.tensor([0.5, 0.1], dtype=torch.float64),
            torch.tensor([2.0, 3.0], dtype=torch.float64),
        ]

        result = convert_coordinate_system(
            SphericalCoordinateSystem, SphericalCoordinateSystem, *angles
        )

        for value, expected in zip(result, angles):
            torch.testing.assert_close(value, expected)

    def test_round_trip_through_half_difference(self):
        """Spherical -> half-difference -> spherical is the identity."""
        angles = [
            torch.tensor(0.4, dtype=torch.float64),
            torch.tensor(1.2, dtype=torch.float64),
            torch.tensor(0.7, dtype=torch.float64),
            torch.tensor(3.5, dtype=torch.float64),
        ]

        half_difference = convert_coordinate_system(
            SphericalCoordinateSystem, HalfDifferenceCoordinateSystem, *angles
        )
        result = convert_coordinate_system(
            HalfDifferenceCoordinateSystem, SphericalCoordinateSystem, *half_difference
        )

        for value, expected in zip(result, angles):
            torch.testing.assert_close(value, expected)

    def test_mirror_direction_to_specular(self):
        """The mirror direction has a specular polar angle of 0."""
        result = convert_coordinate_system(
            SphericalCoordinateSystem,
            SpecularCoordinateSystem,
            torch.tensor(0.5, dtype=torch.float64),
            torch.tensor(0.0, dtype=torch.float64),
            torch.tensor(0.5, dtype=torch.float64),
            torch.tensor(torch.pi, dtype=torch.float64),
        )

        torch.testing.assert_close(
            result[2], torch.tensor(0.0, dtype=torch.float64), atol=1e-7, rtol=0.0
        )
