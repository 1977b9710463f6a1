from .fixer import suggest_fix
from .format_checker import check_command_format, check_file, check_format
from .format_fixer import fix_format
from .normalizer import normalize
from .validator import is_valid, validate

__all__ = [
    "check_command_format",
    "check_file",
    "check_format",
    "fix_format",
    "is_valid",
    "normalize",
    "suggest_fix",
    "validate",
]
