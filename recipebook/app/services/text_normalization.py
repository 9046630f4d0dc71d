"""Title-case normalization for recipe titles, categories and ingredient names."""

from typing import Optional

# Kept lower-case unless they start the text
SMALL_WORDS = frozenset(
    {"a", "an", "the", "and", "but", "or", "for", "nor", "on", "at", "to", "from", "by", "of", "in", "with"}
)


def to_smart_title_case(text: Optional[str]) -> Optional[str]:
    if text is None or not text.strip():
        return text
    words = text.lower().split(" ")
    for idx, word in enumerate(words):
        if word and (idx == 0 or word not in SMALL_WORDS):
            words[idx] = word[0].upper() + word[1:]
    return " ".join(words)


def to_title_case(text: Optional[str]) -> Optional[str]:
    return to_smart_title_case(text)


def normalize_recipe_title(text: Optional[str]) -> Optional[str]:
    return to_smart_title_case(text)


def normalize_category(text: Optional[str]) -> Optional[str]:
    return to_smart_title_case(text)


def normalize_ingredient_name(text: Optional[str]) -> Optional[str]:
    return to_smart_title_case(text)


class TextNormalizationService:
    """Groups the normalizers for callers that take a service object."""

    def to_title_case(self, text: Optional[str]) -> Optional[str]:
        return to_title_case(text)

    def normalize_recipe_title(self, text: Optional[str]) -> Optional[str]:
        return normalize_recipe_title(text)

    def normalize_category(self, text: Optional[str]) -> Optional[str]:
        return normalize_category(text)

    def normalize_ingredient_name(self, text: Optional[str]) -> Optional[str]:
        return normalize_ingredient_name(text)
