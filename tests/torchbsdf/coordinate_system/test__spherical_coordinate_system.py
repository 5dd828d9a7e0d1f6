import math

import pytest
import torch
from hypothesis import given, settings

from torchbsdf.coordinate_system import SphericalCoordinateSystem
from torchbsdf.testing.strategies import unit_hemisphere_directions


class TestSphericalCoordinateSystem:
    """Tests for the spherical coordinate system."""

    def test_class_attributes(self):
        """Maximum angles are pi/2, 2pi, pi/2, 2pi."""
        assert SphericalCoordinateSystem.MAX_ANGLES == (
            math.pi / 2,
            2 * math.pi,
            math.pi / 2,
            2 * math.pi,
        )
        assert len(SphericalCoordinateSystem.ANGLE_NAMES) == 4

    def test_not_instantiable(self):
        """Coordinate systems are used as classes."""
        with pytest.raises(TypeError):
            SphericalCoordinateSystem()

    def test_normal_incidence(self):
        """theta = 0 maps to +z."""
        in_dir, out_dir = SphericalCoordinateSystem.to_xyz(0.0, 0.0, 0.0, 0.0)

        torch.testing.assert_close(in_dir, torch.tensor([0.0, 0.0, 1.0]))
        torch.testing.assert_close(out_dir, torch.tensor([0.0, 0.0, 1.0]))

    def test_known_direction(self):
        """theta = pi/2, phi = pi/2 maps to +y."""
        _, out_dir = SphericalCoordinateSystem.to_xyz(
            0.0, 0.0, math.pi / 2, math.pi / 2
        )

        torch.testing.assert_close(
            out_dir, torch.tensor([0.0, 1.0, 0.0]), atol=1e-6, rtol=0.0
        )

    def test_azimuth_in_range(self):
        """Azimuths are wrapped into [0, 2pi)."""
        direction = torch.tensor([[0.5, -0.5, math.sqrt(0.5)]], dtype=torch.float64)

        _, phi = SphericalCoordinateSystem.from_xyz_direction(direction)

        torch.testing.assert_close(
            phi, torch.tensor([1.75 * math.pi], dtype=torch.float64)
        )

    def test_broadcasting(self):
        """Angles of different shapes broadcast."""
        theta = torch.linspace(0.0, 1.0, 5).unsqueeze(-1)
        phi = torch.linspace(0.0, 6.0, 7)

        in_dir, out_dir = SphericalCoordinateSystem.to_xyz(theta, phi, 0.3, phi)

        assert in_dir.shape == (5, 7, 3)
        assert out_dir.shape == (5, 7, 3)

    def test_isotropic_relative_azimuth(self):
        """The isotropic form returns the wrapped azimuth difference."""
        in_dir, out_dir = SphericalCoordinateSystem.to_xyz(
            torch.tensor(0.4, dtype=torch.float64),
            torch.tensor(5.0, dtype=torch.float64),
            torch.tensor(0.7, dtype=torch.float64),
            torch.tensor(1.0, dtype=torch.float64),
        )

        in_theta, out_theta, relative = SphericalCoordinateSystem.from_xyz_isotropic(
            in_dir, out_dir
        )

        torch.testing.assert_close(in_theta, torch.tensor(0.4, dtype=torch.float64))
        torch.testing.assert_close(out_theta, torch.tensor(0.7, dtype=torch.float64))
        torch.testing.assert_close(
            relative, torch.tensor(2 * math.pi - 4.0, dtype=torch.float64)
        )

    def test_rejects_bad_shape(self):
        """Directions must have a last dimension of 3."""
        with pytest.raises(ValueError):
            SphericalCoordinateSystem.from_xyz(torch.zeros(2), torch.zeros(2))

    @settings(max_examples=50, deadline=None)
    @given(
        in_dir=unit_hemisphere_directions(min_z=0.05),
        out_dir=unit_hemisphere_directions(min_z=0.05),
    )
    def test_round_trip(self, in_dir, out_dir):
        """to_xyz(from_xyz(in, out)) reconstructs the directions."""
        angles = SphericalCoordinateSystem.from_xyz(in_dir, out_dir)

        in_result, out_result = SphericalCoordinateSystem.to_xyz(*angles)

        torch.testing.assert_close(in_result, in_dir, atol=1e-9, rtol=0.0)
        torch.testing.assert_close(out_result, out_dir, atol=1e-9, rtol=0.0)
