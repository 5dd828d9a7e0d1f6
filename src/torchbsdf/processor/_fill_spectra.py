import logging

from ..brdf import Brdf, SourceType
from ..reflectance_model import ReflectanceModel

logger = logging.getLogger(__name__)


def fill_spectra(brdf: Brdf, model: ReflectanceModel) -> None:
    """Overwrite the spectra of a Brdf with values of a reflectance model.

    The model is evaluated at the directions of every grid node and the value
    is written into all wavelength slots. The sample set is marked
    :attr:`SourceType.GENERATED`.

    Examples
    --------
    >>> brdf = Brdf.create(SphericalCoordinateSystem, 7, 1, 7, 13)
    >>> fill_spectra(brdf, Lambertian(0.5))
    >>> brdf.sample_set.source_type
    <SourceType.GENERATED: 'generated'>
    """
    samples = brdf.sample_set

    in_dir, out_dir = brdf.grid_directions()
    values = model.get_value(in_dir, out_dir).to(samples.dtype)

    samples.set_spectra(
        values.unsqueeze(-1).expand(*samples.num_angles, samples.num_wavelengths)
    )
    samples.source_type = SourceType.GENERATED

    logger.debug(
        "Filled %s spectra %s from %r",
        brdf.coordinate_system.NAME,
        samples.num_angles,
        model,
    )
