"""
Templates layer: template records → generated files.

Modules:
- loader.py       → <root>/<group>/*.json → TemplateDefinition
- paths.py        → output directory resolution
- planner.py      → settings + input + definitions → GenerationTask
- substitution.py → {@Name} replacement
- emitter.py      → write the result
"""

from .emitter import emit
from .loader import load_template_definitions
from .paths import resolve_output_directory
from .planner import build_generation_plan
from .substitution import find_placeholders, substitute, unresolved_placeholders

__all__ = [
    "load_template_definitions",
    "resolve_output_directory",
    "build_generation_plan",
    "substitute",
    "find_placeholders",
    "unresolved_placeholders",
    "emit",
]
