from .parse import build_fallback_result, build_parsed_document, parse_resume_text
from .sections import SECTION_PATTERNS, SectionSegmenter, match_section_header, segment_sections

__all__ = [
    "SECTION_PATTERNS",
    "SectionSegmenter",
    "build_fallback_result",
    "build_parsed_document",
    "match_section_header",
    "parse_resume_text",
    "segment_sections",
]
