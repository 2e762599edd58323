"""Item kinds used by the rustdoc search index and their URL slugs."""

from enum import IntEnum

from rustdoc_index.errors import SearchIndexDecodeError


class ItemType(IntEnum):
    """Kind of a documented item.

    Values are the wire tags written by rustdoc and must not be renumbered.
    """

    MOD = 0
    EXTERN_CRATE = 1
    IMPORT = 2
    STRUCT = 3
    ENUM = 4
    FN = 5
    TYPE = 6
    STATIC = 7
    TRAIT = 8
    IMPL = 9
    TYMETHOD = 10
    METHOD = 11
    STRUCTFIELD = 12
    VARIANT = 13
    MACRO = 14
    PRIMITIVE = 15
    ASSOCIATED_TYPE = 16
    CONSTANT = 17
    ASSOCIATED_CONSTANT = 18
    UNION = 19
    FOREIGN_TYPE = 20
    KEYWORD = 21
    EXISTENTIAL = 22
    ATTR = 23
    DERIVE = 24
    TRAIT_ALIAS = 25

    def to_url_slug(self) -> str:
        """Return the token rustdoc uses for this kind in file names and anchors."""
        return URL_SLUGS[self]

    @classmethod
    def from_tag(cls, tag: object) -> "ItemType":
        """Convert a wire tag into an ItemType."""
        # bool is an int subclass; True must not decode as EXTERN_CRATE
        if isinstance(tag, bool) or not isinstance(tag, int):
            msg = f"Item kind tag must be an integer, got {tag!r}"
            raise SearchIndexDecodeError(msg)
        try:
            return cls(tag)
        except ValueError:
            msg = f"Unknown item kind tag: {tag}"
            raise SearchIndexDecodeError(msg) from None

    @classmethod
    def from_slug(cls, slug: str) -> "ItemType":
        """Look up the kind whose URL slug is ``slug``."""
        try:
            return _SLUG_TO_TYPE[slug]
        except KeyError:
            msg = f"Unknown item kind slug: {slug!r}"
            raise ValueError(msg) from None


URL_SLUGS: dict[ItemType, str] = {
    ItemType.MOD: "mod",
    ItemType.EXTERN_CRATE: "externcrate",
    ItemType.IMPORT: "import",
    ItemType.STRUCT: "struct",
    ItemType.ENUM: "enum",
    ItemType.FN: "fn",
    ItemType.TYPE: "type",
    ItemType.STATIC: "static",
    ItemType.TRAIT: "trait",
    ItemType.IMPL: "impl",
    ItemType.TYMETHOD: "tymethod",
    ItemType.METHOD: "method",
    ItemType.STRUCTFIELD: "structfield",
    ItemType.VARIANT: "variant",
    ItemType.MACRO: "macro",
    ItemType.PRIMITIVE: "primitive",
    ItemType.ASSOCIATED_TYPE: "associatedtype",
    ItemType.CONSTANT: "constant",
    ItemType.ASSOCIATED_CONSTANT: "associatedconstant",
    ItemType.UNION: "union",
    ItemType.FOREIGN_TYPE: "foreigntype",
    ItemType.KEYWORD: "keyword",
    ItemType.EXISTENTIAL: "existential",
    ItemType.ATTR: "attr",
    ItemType.DERIVE: "derive",
    ItemType.TRAIT_ALIAS: "traitalias",
}

_SLUG_TO_TYPE: dict[str, ItemType] = {slug: ty for ty, slug in URL_SLUGS.items()}

# Kinds that never produce an entry in the resolved index
IGNORED_KINDS = frozenset({ItemType.EXTERN_CRATE, ItemType.PRIMITIVE, ItemType.KEYWORD})
