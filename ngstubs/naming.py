"""Map schema types and identifiers to TypeScript names.

Type table (schema ``type`` -> TypeScript):
  string  -> string
  integer -> number
  boolean -> boolean
  double  -> number
  float   -> number
  array   -> []      (marker, the element type is resolved separately)
  other   -> any

Identifier conventions:
  to_pascal_case("order_item")  -> "OrderItem"
  to_kebab_case("OrderItem")    -> "order-item"
  singularize("categories")     -> "category"

Words are split on case changes, hyphens, underscores and spaces.
"""

from __future__ import annotations

import re

ARRAY_MARKER = "[]"

_PRIMITIVE_TYPES: dict[str, str] = {
    "string": "string",
    "integer": "number",
    "boolean": "boolean",
    "double": "number",
    "float": "number",
    "array": ARRAY_MARKER,
}

# Plurals the suffix rules below get wrong
_SINGULARS: dict[str, str] = {
    "people": "person",
    "children": "child",
    "men": "man",
    "women": "woman",
    "mice": "mouse",
    "geese": "goose",
    "feet": "foot",
    "teeth": "tooth",
    "statuses": "status",
    "aliases": "alias",
    "atlases": "atlas",
    "biases": "bias",
    "canvases": "canvas",
    "gases": "gas",
    "indices": "index",
    "matrices": "matrix",
    "criteria": "criterion",
    "movies": "movie",
    "cookies": "cookie",
}

_UNCOUNTABLE = {"data", "metadata", "info", "information", "news", "series", "species", "equipment"}

_ES_SUFFIXES = ("sses", "xes", "ches", "shes")

# Singular nouns ending in "s" that the trailing-s rule would clip
_SINGULAR_S = {"alias", "atlas", "bias", "canvas", "gas", "lens", "chaos", "iris"}

# Singulars ending in "che", whose plural is not "-ches" minus "es"
_CHE_SINGULARS = {"cache", "niche", "ache", "headache", "avalanche", "moustache", "mustache"}


def primitive_type_name(schema_type: object) -> str:
    """Return the TypeScript name for a schema primitive type."""
    if not isinstance(schema_type, str):
        return "any"
    return _PRIMITIVE_TYPES.get(schema_type, "any")


def _split_words(name: str) -> list[str]:
    """Split an identifier into its words."""
    s1 = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1 \2", name)
    s2 = re.sub(r"([a-z\d])([A-Z])", r"\1 \2", s1)
    return [w for w in re.split(r"[^A-Za-z0-9]+", s2) if w]


def to_pascal_case(name: str) -> str:
    """Convert any identifier to PascalCase."""
    return "".join(w.capitalize() for w in _split_words(name))


def to_kebab_case(name: str) -> str:
    """Convert any identifier to lowercase kebab-case."""
    return "-".join(w.lower() for w in _split_words(name))


def _match_case(source: str, target: str) -> str:
    if source.isupper():
        return target.upper()
    if source[:1].isupper():
        return target[:1].upper() + target[1:]
    return target


def singularize(word: str) -> str:
    """Return the singular form of a (possibly camelCased) noun.

    Only the last word is inflected, so ``photoUrls`` becomes ``photoUrl``.
    """
    words = _split_words(word)
    if not words:
        return word
    last = words[-1]
    head = word[: word.rfind(last)]
    lower = last.lower()

    if lower in _UNCOUNTABLE or lower in _SINGULAR_S:
        return word
    if lower in _SINGULARS:
        return head + _match_case(last, _SINGULARS[lower])
    if lower.endswith("ies") and len(lower) > 3:
        return head + last[:-3] + ("Y" if last[-3:].isupper() else "y")
    if lower.endswith("ches") and lower[:-1] in _CHE_SINGULARS:
        return head + last[:-1]
    if lower.endswith(_ES_SUFFIXES):
        return head + last[:-2]
    if lower.endswith("s") and not lower.endswith(("ss", "us", "is")):
        return head + last[:-1]
    return word


class NameMapper:
    """Naming conventions used by the emitters.

    Subclass and override the string transforms to change how interface
    names and import paths are derived (e.g. a different plural table).
    """

    def type_name(self, schema_type: str | None) -> str:
        return primitive_type_name(schema_type)

    def pascal(self, name: str) -> str:
        return to_pascal_case(name)

    def kebab(self, name: str) -> str:
        return to_kebab_case(name)

    def singular(self, name: str) -> str:
        return singularize(name)

    def interface_name(self, name: str) -> str:
        """``pets`` -> ``IPet``."""
        return "I" + self.pascal(self.singular(name))

    def module_name(self, name: str) -> str:
        """``orderItems`` -> ``order-item``, the stem of the sibling file."""
        return self.kebab(self.singular(name))


DEFAULT_MAPPER = NameMapper()
