"""
Body Table Presets
==================

Named body tables for the solar system simulation. Each preset carries the
anchor row first, followed by the orbiters, plus menu metadata.

Categories:
- REFERENCE: The full nine-body system
- SMALL: Few-body systems for quick checks
- EDGE: Configurations that exercise initializer edge cases
"""

import copy
from typing import Dict, List, Tuple

from config import solar as solar_config

SUN = {"name": "Sun", "mass": 1.98847e30, "orbit_radius": 0.0, "radius": 7.9634e7,
       "inclination": 0.0, "color": (1.0, 0.8, 0.0, 1.0)}


def _orbiter(name: str, mass: float, orbit_radius: float, radius: float,
             inclination: float = 0.0, color=(1.0, 1.0, 1.0, 1.0)) -> dict:
    return {
        "name": name,
        "mass": mass,
        "orbit_radius": orbit_radius,
        "radius": radius,
        "inclination": inclination,
        "color": color,
    }


PRESETS: Dict[str, dict] = {}

# =============================================================================
# REFERENCE
# =============================================================================

PRESETS["solar_system"] = {
    "name": "Solar System",
    "description": "Sun and eight planets with their orbital inclinations",
    "category": "REFERENCE",
    "bodies": solar_config.BODIES,
}

# =============================================================================
# SMALL
# =============================================================================

PRESETS["earth_sun"] = {
    "name": "Earth and Sun",
    "description": "One Earth-mass orbiter at 1 AU, flat orbit",
    "category": "SMALL",
    "bodies": [
        SUN,
        _orbiter("Earth", 5.9724e24, 1.5e11, 6.3710e5, 0.0, (0.0, 0.5, 1.0, 1.0)),
    ],
}

PRESETS["inner_planets"] = {
    "name": "Inner Planets",
    "description": "Sun with Mercury, Venus, Earth and Mars",
    "category": "SMALL",
    "bodies": solar_config.BODIES[:5],
}

# =============================================================================
# EDGE
# =============================================================================

PRESETS["tilted_pair"] = {
    "name": "Tilted Pair",
    "description": "Two orbiters, one in the reference plane and one at 90 degrees",
    "category": "EDGE",
    "bodies": [
        SUN,
        _orbiter("Flat", 5.9724e24, 2e11, 6.3710e5, 0.0, (0.2, 0.6, 1.0, 1.0)),
        _orbiter("Polar", 6.4171e23, 3e11, 3.3895e5, 90.0, (1.0, 0.3, 0.2, 1.0)),
    ],
}

PRESETS["close_orbits"] = {
    "name": "Close Orbits",
    "description": "Radii below the separation floor; very fast orbits, unstable at the 12h step",
    "category": "EDGE",
    "bodies": [
        SUN,
        _orbiter("Grazer", 3.3011e23, 0.0, 2.4397e5, 0.0, (0.8, 0.5, 0.2, 1.0)),
        _orbiter("Skimmer", 1.8982e27, 1e8, 1e7, 45.0, (0.9, 0.6, 0.3, 1.0)),
    ],
}


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def get_preset_list() -> List[Tuple[str, dict]]:
    """Get list of all presets sorted by category."""
    category_order = ["REFERENCE", "SMALL", "EDGE"]

    sorted_presets = sorted(
        PRESETS.items(),
        key=lambda x: (category_order.index(x[1]["category"]) if x[1]["category"] in category_order else 99, x[0])
    )
    return sorted_presets


def print_preset_menu():
    """Print formatted preset selection menu."""
    presets = get_preset_list()
    current_category = None

    print("\n" + "=" * 70)
    print("  SOLAR SYSTEM PRESETS")
    print("=" * 70)

    for idx, (key, preset) in enumerate(presets):
        if preset["category"] != current_category:
            current_category = preset["category"]
            print(f"\n{'─' * 70}")
            print(f"  {current_category}")
            print(f"{'─' * 70}")

        print(f"  [{idx:2d}] {preset['name']:<20} {len(preset['bodies']):>2} bodies | key: {key}")
        print(f"       {preset['description']}")

    print(f"\n{'=' * 70}")


def get_preset_by_index(index: int) -> Tuple[str, dict]:
    """Get preset by menu index."""
    presets = get_preset_list()
    if 0 <= index < len(presets):
        return presets[index]
    return None, None


def get_preset_config(key: str) -> dict:
    """Get an independent copy of a preset by key, or None if unknown."""
    if key not in PRESETS:
        return None

    preset = copy.deepcopy(PRESETS[key])
    preset["key"] = key
    return preset
