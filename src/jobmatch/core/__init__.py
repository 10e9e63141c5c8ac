"\"\"\"Recommendation pipeline stages.\"\"\""

from __future__ import annotations

from .assembly import assemble_recommendations
from .fallback import FallbackPolicy
from .parsing import decode_matches, extract_generated_text, extract_json_span, parse_matches
from .profile import assemble_profile
from .prompt import build_prompt
from .validation import ValidationReport, is_valid_job_id, validate_matches

__all__ = [
    "FallbackPolicy",
    "ValidationReport",
    "assemble_profile",
    "assemble_recommendations",
    "build_prompt",
    "decode_matches",
    "extract_generated_text",
    "extract_json_span",
    "is_valid_job_id",
    "parse_matches",
    "validate_matches",
]
