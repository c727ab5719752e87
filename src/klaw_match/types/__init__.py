"""Tagged values: Option, Result and the contracts the matcher relies on."""

from klaw_match.types.option import Nothing, NothingType, Option, Some
from klaw_match.types.protocols import OptionLike, ResultLike, is_option, is_result
from klaw_match.types.result import Err, Ok, Result

__all__ = [
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'OptionLike',
    'Result',
    'ResultLike',
    'Some',
    'is_option',
    'is_result',
]
