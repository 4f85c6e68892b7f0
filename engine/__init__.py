from .conversion import ConversionSummary, convert_stream
from .paths import check_output_dir, resolve_output_dir

__all__ = [
    "ConversionSummary",
    "check_output_dir",
    "convert_stream",
    "resolve_output_dir",
]
