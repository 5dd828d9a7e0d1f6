import torch

from torchbsdf.interpolation import smootherstep, smoothstep


class TestSmoothstep:
    """Tests for the cubic Hermite step."""

    def test_edges_and_midpoint(self):
        """Values 0, 1/2 and 1 at the lower edge, midpoint and upper edge."""
        x = torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64)

        result = smoothstep(0.0, 1.0, x)

        torch.testing.assert_close(
            result, torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64)
        )

    def test_clamped_outside_edges(self):
        """Values saturate outside the edges."""
        result = smoothstep(0.0, 1.0, torch.tensor([-2.0, 3.0]))

        torch.testing.assert_close(result, torch.tensor([0.0, 1.0]))

    def test_cubic_formula(self):
        """Interior values follow 3c^2 - 2c^3."""
        c = torch.linspace(0.0, 1.0, 11, dtype=torch.float64)

        torch.testing.assert_close(smoothstep(0.0, 1.0, c), 3 * c**2 - 2 * c**3)

    def test_rescaled_edges(self):
        """Edges other than [0, 1] rescale the input."""
        result = smoothstep(2.0, 4.0, torch.tensor(3.0))

        torch.testing.assert_close(result, torch.tensor(0.5))


class TestSmootherstep:
    """Tests for the fifth-order Hermite step."""

    def test_edges_and_midpoint(self):
        """Values 0, 1/2 and 1 at the lower edge, midpoint and upper edge."""
        x = torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64)

        result = smootherstep(0.0, 1.0, x)

        torch.testing.assert_close(
            result, torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64)
        )

    def test_flat_at_edges(self):
        """First derivative vanishes at both edges."""
        x = torch.tensor([0.0, 1.0], dtype=torch.float64, requires_grad=True)

        (gradient,) = torch.autograd.grad(smootherstep(0.0, 1.0, x).sum(), x)

        torch.testing.assert_close(gradient, torch.zeros(2, dtype=torch.float64))

    def test_monotonic(self):
        """The step never decreases."""
        x = torch.linspace(-0.5, 1.5, 101, dtype=torch.float64)

        result = smootherstep(0.0, 1.0, x)

        assert (result[1:] >= result[:-1]).all()
