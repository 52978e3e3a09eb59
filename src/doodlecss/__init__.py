"""doodlecss - compile doodle token trees into CSS for a grid of cells."""

__version__ = "0.1.0"

from doodlecss.config import CompilerConfig  # noqa: E402
from doodlecss.engine import generate  # noqa: E402
from doodlecss.model import CompileResult, GridSize, Styles  # noqa: E402
from doodlecss.parser import load_tokens, parse_value  # noqa: E402

__all__ = [
    "__version__",
    "CompilerConfig",
    "CompileResult",
    "GridSize",
    "Styles",
    "generate",
    "load_tokens",
    "parse_value",
]
