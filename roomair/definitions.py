"""
Enumerations shared by the catalog, the jet model, the velocity field and the
comfort evaluation.
"""
from enum import StrEnum


class TerminalCategory(StrEnum):
    SUPPLY = 'supply'
    EXHAUST = 'exhaust'


class Mounting(StrEnum):
    CEILING = 'ceiling'
    WALL = 'wall'


class SlotDirection(StrEnum):
    BIDIRECTIONAL = 'bidirectional'
    UNIDIRECTIONAL = 'unidirectional'
    VERTICAL = 'vertical'


class JetFamily(StrEnum):
    """Geometry family of a terminal's jet. The family determines the throw
    formula, the decay law, the flow direction around the terminal and the
    occupied-zone estimate (see `roomair.air_jets.families`).
    """
    RADIAL = 'radial'                # swirl and high-induction ceiling diffusers
    PLANAR = 'planar'                # slot diffusers
    DIRECTED = 'directed'            # nozzles
    HEMISPHERICAL = 'hemispherical'  # plate valves
    GRILLE = 'grille'                # ceiling exhaust grilles
    GENERIC = 'generic'              # anything else: point source/sink
