import math

import pytest
import torch

from torchbsdf.brdf import Brdf, ColorModel, SampleSet
from torchbsdf.coordinate_system import (
    SpecularCoordinateSystem,
    SphericalCoordinateSystem,
)


class TestBrdfCreation:
    """Tests for Brdf construction."""

    def test_create_equal_interval(self):
        """create fills every grid with a uniform subdivision."""
        brdf = Brdf.create(
            SphericalCoordinateSystem, 7, 1, 7, 13, dtype=torch.float64
        )

        samples = brdf.sample_set
        assert samples.num_angles == (7, 1, 7, 13)
        assert brdf.is_isotropic()
        for dim, max_angle in enumerate(SphericalCoordinateSystem.MAX_ANGLES):
            angles = samples.get_angles(dim)
            if angles.shape[0] > 1:
                assert samples.is_equal_interval(dim)
                assert angles[-1].item() == pytest.approx(max_angle)

    def test_create_without_equal_interval(self):
        """Grids stay zero when equal_interval_angles is False."""
        brdf = Brdf.create(
            SphericalCoordinateSystem, 3, 1, 3, 3, equal_interval_angles=False
        )

        assert not brdf.sample_set.get_angles(0).any()

    def test_wraps_sample_set(self):
        """The constructor takes ownership of a sample set."""
        samples = SampleSet(2, 1, 2, 2, ColorModel.RGB)

        brdf = Brdf(samples, SpecularCoordinateSystem)

        assert brdf.sample_set is samples
        assert brdf.coordinate_system is SpecularCoordinateSystem
        assert brdf.max_angles == SpecularCoordinateSystem.MAX_ANGLES

    def test_rejects_bad_arguments(self):
        """Sample set and coordinate system types are checked."""
        samples = SampleSet(1, 1, 1, 1)

        with pytest.raises(TypeError):
            Brdf(torch.zeros(1), SphericalCoordinateSystem)
        with pytest.raises(TypeError):
            Brdf(samples, "spherical")


class TestBrdfDirections:
    """Tests for node directions."""

    def test_get_directions(self):
        """get_directions converts the angles of a node."""
        brdf = Brdf.create(SphericalCoordinateSystem, 3, 1, 3, 5)

        in_dir, out_dir = brdf.get_directions(2, 0, 1, 2)

        torch.testing.assert_close(
            in_dir, torch.tensor([1.0, 0.0, 0.0]), atol=1e-6, rtol=0.0
        )
        expected = torch.tensor(
            [-math.sin(math.pi / 4), 0.0, math.cos(math.pi / 4)]
        )
        torch.testing.assert_close(out_dir, expected, atol=1e-6, rtol=0.0)

    def test_grid_directions(self):
        """grid_directions has one direction per node."""
        brdf = Brdf.create(SphericalCoordinateSystem, 3, 2, 4, 5)

        in_dir, out_dir = brdf.grid_directions()

        assert in_dir.shape == (3, 2, 4, 5, 3)
        assert out_dir.shape == (3, 2, 4, 5, 3)
        torch.testing.assert_close(
            in_dir[1, 1, 2, 3], brdf.get_directions(1, 1, 2, 3)[0]
        )

    def test_from_xyz_matches_coordinate_system(self):
        """from_xyz delegates to the coordinate system."""
        brdf = Brdf.create(SpecularCoordinateSystem, 2, 1, 2, 2)
        in_dir, out_dir = SpecularCoordinateSystem.to_xyz(0.3, 0.0, 0.2, 1.0)

        for value, expected in zip(
            brdf.from_xyz(in_dir, out_dir),
            SpecularCoordinateSystem.from_xyz(in_dir, out_dir),
        ):
            torch.testing.assert_close(value, expected)


class TestBrdfEditing:
    """Tests for angle maintenance and copies."""

    def test_clamp_angles(self):
        """clamp_angles uses the coordinate system's ranges."""
        brdf = Brdf.create(
            SphericalCoordinateSystem, 3, 1, 1, 1, dtype=torch.float64
        )
        brdf.sample_set.set_angles(
            0, torch.deg2rad(torch.tensor([-5.0, 45.0, 100.0], dtype=torch.float64))
        )

        brdf.clamp_angles()

        torch.testing.assert_close(
            torch.rad2deg(brdf.sample_set.get_angles(0)),
            torch.tensor([0.0, 45.0, 90.0], dtype=torch.float64),
        )

    def test_initialize_equal_interval_angles(self):
        """Reinitialization restores uniform grids."""
        brdf = Brdf.create(SphericalCoordinateSystem, 3, 1, 3, 3)
        brdf.sample_set.set_angle(0, 1, 0.1)

        brdf.initialize_equal_interval_angles()

        assert brdf.sample_set.is_equal_interval(0)

    def test_clone_is_independent(self):
        """Clones own their sample set."""
        brdf = Brdf.create(SphericalCoordinateSystem, 2, 1, 2, 2)
        copy = brdf.clone()

        copy.sample_set.set_spectrum(0, 0, 0, 0, [1.0])

        assert copy.coordinate_system is SphericalCoordinateSystem
        assert not brdf.sample_set.spectra.any()

    def test_get_spectrum_at_node(self):
        """get_spectrum returns stored spectra at nodes."""
        brdf = Brdf.create(
            SphericalCoordinateSystem, 3, 1, 3, 5, dtype=torch.float64
        )
        brdf.sample_set.set_spectra(
            torch.rand(3, 1, 3, 5, 1, dtype=torch.float64)
        )
        in_dir, out_dir = brdf.get_directions(1, 0, 2, 3)

        result = brdf.get_spectrum(in_dir, out_dir)

        torch.testing.assert_close(
            result, brdf.sample_set.spectrum_at(1, 0, 2, 3)
        )
