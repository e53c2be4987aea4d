from .chooser import IndexChooser, RandomIndexChooser
from .generator import TemplateResponseGenerator, generate_persona_response
from .llm_generator import LLMResponseGenerator
from .tags import extract_tags

__all__ = [
    "IndexChooser",
    "LLMResponseGenerator",
    "RandomIndexChooser",
    "TemplateResponseGenerator",
    "extract_tags",
    "generate_persona_response",
]
