"""Configuration for the solar system gravity simulation."""

# =============================================================================
# PHYSICS - SI units throughout
# =============================================================================

PHYSICS = {
    "G": 6.67430e-11,              # Gravitational constant (m^3 kg^-1 s^-2)
    "time_step": 43200.0,          # 12 hours per step, fixed for the whole run
}

# Render-space conversion (consumed by whatever draws the bodies)
# PRESET: textured spheres - linear radius scale
RENDER = {
    "position_scale": 5e10,        # meters per render unit
    "radius_scale": 1e7,
    "radius_mode": "linear",
}

# PRESET: lit spheres - cube-root radius compression
# RENDER = {
#     "position_scale": 5e10,
#     "radius_scale": 150.0,
#     "radius_mode": "cbrt",
# }

SIMULATION = {
    "target_fps": 60,
    "steps_per_frame": 1,          # One integration step per displayed frame
    "report_interval": 730,        # ~1 simulated year at 12h steps
}

# =============================================================================
# BODY TABLE - anchor first, orbit_radius is ignored for it
# =============================================================================

BODIES = [
    {"name": "Sun",     "mass": 1.98847e30, "orbit_radius": 0.0,     "radius": 7.9634e7, "inclination": 0.0, "color": (1.0, 0.8, 0.0, 1.0)},
    {"name": "Mercury", "mass": 3.3011e23,  "orbit_radius": 5.4e11,  "radius": 2.4397e5, "inclination": 7.0, "color": (0.8, 0.5, 0.2, 1.0)},
    {"name": "Venus",   "mass": 4.8675e24,  "orbit_radius": 7e11,    "radius": 6.0518e5, "inclination": 3.4, "color": (0.9, 0.7, 0.2, 1.0)},
    {"name": "Earth",   "mass": 5.9724e24,  "orbit_radius": 11e11,   "radius": 6.3710e5, "inclination": 0.0, "color": (0.0, 0.5, 1.0, 1.0)},
    {"name": "Mars",    "mass": 6.4171e23,  "orbit_radius": 15e11,   "radius": 3.3895e5, "inclination": 1.9, "color": (1.0, 0.2, 0.1, 1.0)},
    {"name": "Jupiter", "mass": 1.8982e27,  "orbit_radius": 23e11,   "radius": 1e7,      "inclination": 1.3, "color": (0.9, 0.6, 0.3, 1.0)},
    {"name": "Saturn",  "mass": 5.6834e26,  "orbit_radius": 28e11,   "radius": 4.8232e6, "inclination": 2.5, "color": (0.9, 0.8, 0.5, 1.0)},
    {"name": "Uranus",  "mass": 8.6810e25,  "orbit_radius": 37e11,   "radius": 2.5362e6, "inclination": 0.8, "color": (0.5, 0.8, 0.9, 1.0)},
    {"name": "Neptune", "mass": 1.02413e26, "orbit_radius": 4.503e12, "radius": 2.4622e6, "inclination": 1.8, "color": (0.3, 0.4, 0.9, 1.0)},
]
