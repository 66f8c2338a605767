"""Localized prompt templates.

Adding a language means adding one more ``PromptTemplateSet`` and one entry in
``TEMPLATES``; the composer itself never changes.
"""

from collabdesk.domain.types import Language
from collabdesk.llm.prompts.base import PromptTemplateSet
from collabdesk.llm.prompts.en import ENGLISH
from collabdesk.llm.prompts.zh import CHINESE

TEMPLATES: dict[Language, PromptTemplateSet] = {
    Language.EN: ENGLISH,
    Language.ZH: CHINESE,
}


def get_templates(language: Language | str) -> PromptTemplateSet:
    """Return the template set for a language tag.

    Raises:
        ValueError: If the tag is not a supported language.
    """
    return TEMPLATES[Language(language)]


__all__ = [
    "CHINESE",
    "ENGLISH",
    "TEMPLATES",
    "PromptTemplateSet",
    "get_templates",
]
