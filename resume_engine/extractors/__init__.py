from .education import extract_education
from .experience import extract_experience
from .personal import extract_personal_info
from .projects import extract_certifications, extract_projects
from .skills import extract_skills
from .summary import extract_summary

__all__ = [
    "extract_certifications",
    "extract_education",
    "extract_experience",
    "extract_personal_info",
    "extract_projects",
    "extract_skills",
    "extract_summary",
]
