"""
Packaged seed profiles for fixture generation.

Each profile is a package exposing three seed texts in the blank-line
grouped format read by ``SeedLoader``:

    sourcedata/
    ├── __init__.py      # Profile registry
    ├── default.py       # Re-exports the default profile
    └── starter/         # Small sample chain
        └── __init__.py  # CATEGORIES, COUNTRIES, COMPANIES

Profiles are only used when selected explicitly (``profile`` in the config or
``--profile`` on the command line).

## Creating a New Profile

1. Create ``sourcedata/<name>/__init__.py`` defining ``CATEGORIES``,
   ``COUNTRIES`` and ``COMPANIES`` strings.
2. Import it here and add it to ``PROFILES``.
"""

from types import ModuleType

from retail_fixtures.sourcedata import default, starter

PROFILES: dict[str, ModuleType] = {
    "default": default,
    "starter": starter,
}


def get_profile(name: str) -> ModuleType:
    """
    Look up a seed profile by name.

    Raises:
        SeedLoadError: If no profile has that name
    """
    if name not in PROFILES:
        from retail_fixtures.shared.exceptions import SeedLoadError

        raise SeedLoadError(
            f"Unknown seed profile '{name}'. Available: {sorted(PROFILES)}"
        )
    return PROFILES[name]


__all__ = ["PROFILES", "get_profile", "default", "starter"]
