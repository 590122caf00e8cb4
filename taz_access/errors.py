"""
Exceptions raised while tabulating destinations to zones.
All of them abort the run; nothing in the package catches them.
"""


class TazAccessError(Exception):
    """Base class for taz_access errors."""


class GeometryError(TazAccessError, ValueError):
    """Null, empty, invalid or wrongly-typed geometry in a zone or feature layer."""


class CoordinateReferenceMismatch(TazAccessError, ValueError):
    """Zone and feature layers are not in the same (known) CRS."""


class ZoneNotFoundError(TazAccessError, LookupError):
    """A tabulation references a zone identifier missing from the register."""


class ZoneRegisterError(TazAccessError, ValueError):
    """The zone register cannot be built (duplicate/null ids, bad region filter)."""
