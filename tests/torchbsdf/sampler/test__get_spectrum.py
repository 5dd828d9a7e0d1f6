import math

import pytest
import torch

from torchbsdf.brdf import Brdf, ColorModel, SampleSet, SampleSet2D
from torchbsdf.coordinate_system import (
    HalfDifferenceCoordinateSystem,
    SpecularCoordinateSystem,
    SphericalCoordinateSystem,
)
from torchbsdf.sampler import InvalidDirectionError, get_spectrum, get_value


def _direction(theta, phi):
    return torch.tensor(
        [
            math.sin(theta) * math.cos(phi),
            math.sin(theta) * math.sin(phi),
            math.cos(theta),
        ],
        dtype=torch.float64,
    )


def _random_brdf(coordinate_system, *num_angles):
    brdf = Brdf.create(
        coordinate_system,
        *num_angles,
        color_model=ColorModel.RGB,
        dtype=torch.float64,
    )
    brdf.sample_set.set_spectra(torch.rand(*num_angles, 3, dtype=torch.float64))
    return brdf


class TestGetSpectrum:
    """Tests for direction-based sampling."""

    def test_single_sample(self):
        """A 1x1 set returns its only spectrum for any direction pair."""
        brdf = Brdf.create(SphericalCoordinateSystem)
        brdf.sample_set.set_spectrum(0, 0, 0, 0, [5.0])
        in_dir = torch.nn.functional.normalize(torch.rand(8, 3) + 0.1, dim=-1)
        out_dir = torch.nn.functional.normalize(torch.randn(8, 3), dim=-1)

        result = get_spectrum(brdf, in_dir, out_dir)

        torch.testing.assert_close(result, torch.full((8, 1), 5.0))

    def test_node_direction(self):
        """Directions of a node return its spectrum."""
        brdf = _random_brdf(SphericalCoordinateSystem, 4, 5, 4, 7)
        in_dir, out_dir = brdf.get_directions(1, 2, 2, 3)

        result = get_spectrum(brdf, in_dir, out_dir, interpolation="spline")

        torch.testing.assert_close(result, brdf.sample_set.spectrum_at(1, 2, 2, 3))

    def test_batch_shape(self):
        """Direction batches broadcast."""
        brdf = _random_brdf(SphericalCoordinateSystem, 3, 1, 3, 5)
        in_dir = _direction(0.3, 0.0).expand(4, 1, 3)
        out_dir = torch.stack([_direction(0.5, phi) for phi in (0.5, 1.0, 2.0)])

        result = get_spectrum(brdf, in_dir, out_dir)

        assert result.shape == (4, 3, 3)

    def test_sample_set_with_coordinate_system(self):
        """A bare SampleSet samples like the equivalent Brdf."""
        brdf = _random_brdf(SpecularCoordinateSystem, 3, 1, 4, 5)
        in_dir = _direction(0.4, 0.2)
        out_dir = _direction(0.6, 2.0)

        expected = get_spectrum(brdf, in_dir, out_dir)
        result = get_spectrum(
            brdf.sample_set,
            in_dir,
            out_dir,
            coordinate_system=SpecularCoordinateSystem,
        )

        torch.testing.assert_close(result, expected)

    def test_sample_set_2d(self):
        """SampleSet2D uses the spherical angles of one direction."""
        samples = SampleSet2D(3, 5, equal_interval_angles=True, dtype=torch.float64)
        theta, phi = torch.meshgrid(
            samples.theta_angles, samples.phi_angles, indexing="ij"
        )
        samples.set_spectra((theta + 0.1 * phi)[..., None])

        result = get_spectrum(samples, _direction(0.5, 2.0))

        torch.testing.assert_close(
            result, torch.tensor([0.7], dtype=torch.float64)
        )

    def test_rejects_downward_incoming_direction(self):
        """Incoming directions with z < 0 raise InvalidDirectionError."""
        brdf = _random_brdf(SphericalCoordinateSystem, 3, 1, 3, 5)
        in_dir = torch.stack(
            [_direction(0.3, 0.0), _direction(2.0, 0.0), _direction(2.5, 1.0)]
        )
        out_dir = _direction(0.3, 1.0)

        with pytest.raises(InvalidDirectionError) as info:
            get_spectrum(brdf, in_dir, out_dir)

        assert info.value.count == 2

    def test_accepts_downward_outgoing_direction(self):
        """Outgoing directions below the surface are extrapolated."""
        brdf = _random_brdf(SphericalCoordinateSystem, 3, 1, 3, 5)

        result = get_spectrum(brdf, _direction(0.3, 0.0), _direction(2.0, 1.0))

        assert torch.isfinite(result).all()

    def test_source_arguments(self):
        """Invalid source/argument combinations are rejected."""
        brdf = _random_brdf(SphericalCoordinateSystem, 2, 1, 2, 2)
        samples2d = SampleSet2D(2, 2)
        in_dir = _direction(0.3, 0.0)

        with pytest.raises(ValueError):
            get_spectrum(brdf.sample_set, in_dir, in_dir)
        with pytest.raises(ValueError):
            get_spectrum(brdf, in_dir)
        with pytest.raises(ValueError):
            get_spectrum(
                brdf, in_dir, in_dir, coordinate_system=SpecularCoordinateSystem
            )
        with pytest.raises(ValueError):
            get_spectrum(samples2d, in_dir, in_dir)
        with pytest.raises(TypeError):
            get_spectrum(torch.zeros(3), in_dir, in_dir)


class TestIsotropy:
    """Isotropic sets are invariant under rotations about the normal."""

    @pytest.mark.parametrize(
        "coordinate_system",
        [
            SphericalCoordinateSystem,
            SpecularCoordinateSystem,
            HalfDifferenceCoordinateSystem,
        ],
    )
    @pytest.mark.parametrize("interpolation", ["linear", "spline"])
    def test_rotation_invariance(self, coordinate_system, interpolation):
        """Rotating both directions by the same azimuth keeps the result."""
        brdf = _random_brdf(coordinate_system, 5, 1, 5, 9)

        results = [
            get_spectrum(
                brdf,
                _direction(0.4, 0.3 + rotation),
                _direction(0.7, 2.0 + rotation),
                interpolation=interpolation,
            )
            for rotation in (0.0, 0.8, 1.9, 3.5)
        ]

        for result in results[1:]:
            torch.testing.assert_close(result, results[0])


class TestGetValue:
    """Tests for single-wavelength sampling."""

    def test_matches_get_spectrum(self):
        """get_value is one slot of get_spectrum."""
        brdf = _random_brdf(SphericalCoordinateSystem, 3, 4, 3, 5)
        in_dir = torch.stack([_direction(0.3, 0.4), _direction(1.0, 3.0)])
        out_dir = torch.stack([_direction(0.5, 1.0), _direction(0.2, 5.0)])

        spectrum = get_spectrum(brdf, in_dir, out_dir, interpolation="spline")
        value = get_value(
            brdf, in_dir, out_dir, wavelength_index=2, interpolation="spline"
        )

        assert value.shape == (2,)
        torch.testing.assert_close(value, spectrum[..., 2])

    @pytest.mark.parametrize("index", [3, -1])
    def test_index_out_of_range(self, index):
        """Wavelength indices outside [0, num_wavelengths) raise IndexError."""
        brdf = _random_brdf(SphericalCoordinateSystem, 2, 1, 2, 2)

        with pytest.raises(IndexError):
            get_value(
                brdf,
                _direction(0.1, 0.0),
                _direction(0.1, 1.0),
                wavelength_index=index,
            )

    def test_sample_set(self):
        """Bare sample sets need a coordinate system."""
        samples = SampleSet(2, 1, 2, 2, ColorModel.MONOCHROMATIC)
        samples.set_spectra(torch.ones(2, 1, 2, 2, 1))

        value = get_value(
            samples,
            _direction(0.1, 0.0),
            _direction(0.2, 1.0),
            wavelength_index=0,
            coordinate_system=SphericalCoordinateSystem,
        )

        torch.testing.assert_close(value, torch.tensor(1.0, dtype=torch.float64))
