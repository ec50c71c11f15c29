"""Derive custom resource names from an API's operation catalog.

A resource is anything the API can create one of:
  - CreateRepository        -> Repository
  - CreateDBClusterSnapshot -> DBClusterSnapshot
  - CreateBatchRepositories -> skipped (bulk variant)
  - CreateTags              -> skipped (plural, not one resource)
  - DescribeRepository      -> skipped (not a create operation)

Singular/plural detection is best-effort English inflection: an irregular
table, a list of uncountable nouns, and suffix rules, applied to the last
word of a PascalCase name. It is good enough for scaffolding, not an
authority on grammar.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

CREATE_PREFIX = "Create"
BATCH_CREATE_PREFIX = "CreateBatch"

# Irregular singular -> plural forms
_PLURALS: dict[str, str] = {
    "person": "people",
    "man": "men",
    "woman": "women",
    "child": "children",
    "foot": "feet",
    "tooth": "teeth",
    "mouse": "mice",
    "goose": "geese",
    "index": "indices",
    "matrix": "matrices",
    "vertex": "vertices",
    "analysis": "analyses",
    "basis": "bases",
    "crisis": "crises",
    "hypothesis": "hypotheses",
    "criterion": "criteria",
    "alias": "aliases",
    "canvas": "canvases",
    "gas": "gases",
    "quiz": "quizzes",
    "leaf": "leaves",
    "life": "lives",
    "shelf": "shelves",
}

_SINGULARS: dict[str, str] = {v: k for k, v in _PLURALS.items()}

# Same form in singular and plural; treated as singular
_UNCOUNTABLE: frozenset[str] = frozenset({
    "data",
    "metadata",
    "information",
    "equipment",
    "feedback",
    "news",
    "series",
    "species",
    "software",
    "hardware",
    "firmware",
    "sheep",
    "fish",
    "deer",
})

# Endings of singular nouns that would otherwise look plural
_SINGULAR_ENDINGS = ("ss", "us", "is")


def _camel_to_snake(name: str) -> str:
    """Convert camelCase or PascalCase to snake_case."""
    s1 = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    return re.sub(r"([a-z\d])([A-Z])", r"\1_\2", s1).lower()


def _split_last_word(name: str) -> tuple[str, str]:
    """Split a PascalCase name into (head, last word)."""
    words = _camel_to_snake(name).split("_")
    last_len = len(words[-1])
    return name[: len(name) - last_len], name[len(name) - last_len:]


def _match_case(word: str, template: str) -> str:
    """Give word the capitalization of template."""
    if template.isupper() and len(template) > 1:
        return word.upper()
    if template[:1].isupper():
        return word[:1].upper() + word[1:]
    return word


def _singularize_word(word: str) -> str:
    lower = word.lower()
    if lower in _UNCOUNTABLE or lower in _PLURALS:
        return word
    if lower in _SINGULARS:
        return _match_case(_SINGULARS[lower], word)
    if lower.endswith(_SINGULAR_ENDINGS):
        return word
    if lower.endswith("ies") and len(lower) > 3:
        return word[:-3] + "y"
    if lower.endswith(("sses", "uses", "xes", "zes", "ches", "shes")):
        return word[:-2]
    if lower.endswith("s"):
        return word[:-1]
    return word


def _pluralize_word(word: str) -> str:
    lower = word.lower()
    if lower in _UNCOUNTABLE or lower in _SINGULARS:
        return word
    if lower in _PLURALS:
        return _match_case(_PLURALS[lower], word)
    if lower.endswith("y") and len(lower) > 1 and lower[-2] not in "aeiou":
        return word[:-1] + "ies"
    if lower.endswith(("s", "x", "z", "ch", "sh")):
        return word + "es"
    return word + "s"


def singularize(name: str) -> str:
    """Return the singular form of a (PascalCase) resource name."""
    if not name:
        return name
    head, last = _split_last_word(name)
    return head + _singularize_word(last)


def pluralize(name: str) -> str:
    """Return the plural form of a (PascalCase) resource name."""
    if not name:
        return name
    head, last = _split_last_word(name)
    return head + _pluralize_word(last)


def is_singular(name: str) -> bool:
    """Check whether a name is a singular noun.

    A name is singular when singularizing it leaves it unchanged, so
    uncountable nouns (Metadata, Information) count as singular even though
    pluralizing them does not change their spelling either. Empty names are
    never singular.
    """
    if not name:
        return False
    return singularize(name) == name


def snake_case(name: str) -> str:
    """Template filter: PascalCase -> snake_case."""
    return _camel_to_snake(name)


def derive_resource_names(operation_names: Iterable[str]) -> list[str]:
    """Return the resource names created by the given operations.

    Order follows the operation catalog; duplicates keep the first occurrence.
    """
    names: list[str] = []
    seen: set[str] = set()
    for op_name in operation_names:
        if op_name.startswith(BATCH_CREATE_PREFIX):
            continue
        if not op_name.startswith(CREATE_PREFIX):
            continue
        res_name = op_name[len(CREATE_PREFIX):]
        if not is_singular(res_name):
            continue
        if res_name in seen:
            continue
        seen.add(res_name)
        names.append(res_name)
    return names
