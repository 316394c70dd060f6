from .writer import render_scad, write_scad, generate_print_plate_scad
from .compiler import compile_scad, check_scad, openscad_available, stl_bounds
