from .polygon import (
    polygon_area,
    polygon_bounds,
    regular_polygon,
    circumradius_from_flats,
    width_across_flats,
    rounded_rectangle,
)
