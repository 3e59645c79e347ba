"""
pokerrange Importers - scenario files mapped onto the range grid
"""

from pokerrange.importers.hrc import parse_hrc_json, validate_hrc_file
from pokerrange.importers.schemas import ImportResult, TrainerSpot, SpotRange

__all__ = ["parse_hrc_json", "validate_hrc_file", "ImportResult", "TrainerSpot", "SpotRange"]
