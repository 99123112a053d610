# path_planner/domain/mechanics/mechanics_viewport.py
import math

from path_planner.domain.entities.geography import (
    GeoCoord,
    PixelCoord,
    PixelOffset,
    Size,
    Viewport,
)


def _pixel_to_rel(pixel: PixelCoord, size: Size) -> tuple[float, float]:
    # [-1, 1] on both axes, x stretched by the aspect ratio, y up
    x_rel = ((pixel.x / size.width) * 2.0 - 1.0) * size.width / size.height
    y_rel = (1.0 - pixel.y / size.height) * 2.0 - 1.0
    return x_rel, y_rel


class ViewportTransform:
    """
    Pixel <-> geo math over a mutable Viewport.

    The horizontal axis is divided by cos(center latitude) so a degree of
    longitude and a degree of latitude cover roughly the same distance on screen.
    """

    def __init__(self, viewport: Viewport):
        self.viewport = viewport

    def pixel_to_geo(self, pixel: PixelCoord, size: Size) -> GeoCoord:
        vp = self.viewport
        x_rel, y_rel = _pixel_to_rel(pixel, size)
        x_long_rel = x_rel / vp.scale / math.cos(math.radians(vp.center.lat))
        y_lat_rel = y_rel / vp.scale
        return GeoCoord(long=x_long_rel + vp.center.long, lat=y_lat_rel + vp.center.lat)

    def geo_to_pixel(self, coord: GeoCoord, size: Size) -> PixelCoord:
        vp = self.viewport
        x_rel = (coord.long - vp.center.long) * vp.scale * math.cos(math.radians(vp.center.lat))
        y_rel = (coord.lat - vp.center.lat) * vp.scale
        x = (x_rel * size.height / size.width + 1.0) / 2.0 * size.width
        y = (1.0 - (y_rel + 1.0) / 2.0) * size.height
        return PixelCoord(x, y)

    def zoom(self, factor: float, anchor: PixelCoord, size: Size) -> None:
        """
        Multiply the scale by `factor`, keeping the geo coordinate under `anchor`.

        2.0 shows half the longitude across the viewport, 0.5 shows double.
        """
        target = self.pixel_to_geo(anchor, size)
        self.viewport.scale *= factor

        # Solve latitude first: the longitude term depends on the new center latitude
        x_rel, y_rel = _pixel_to_rel(anchor, size)
        lat = target.lat - y_rel / self.viewport.scale
        long = target.long - x_rel / self.viewport.scale / math.cos(math.radians(lat))
        self.viewport.center = GeoCoord(long=long, lat=lat)

    def pan(self, offset: PixelOffset, size: Size) -> None:
        c = size.center
        self.viewport.center = self.pixel_to_geo(PixelCoord(c.x + offset.x, c.y + offset.y), size)


def scroll_zoom_factor(delta: float, base: float = 1.003) -> float:
    # Exponential in the scroll delta: always > 0 and 1.0 at rest
    return base**delta
