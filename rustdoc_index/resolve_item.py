"""Rules for turning one raw search index item into a key and a URL."""

from rustdoc_index.errors import ItemResolutionError
from rustdoc_index.format_url import PATH_SEPARATOR, format_url, join_key, join_url
from rustdoc_index.item_type import IGNORED_KINDS, ItemType
from rustdoc_index.lookup_parent import ParentLookup
from rustdoc_index.path_entry import PathEntry
from rustdoc_index.raw_item import RawItem
from rustdoc_index.resolved_item import ResolvedItem


def find_parent(raw: RawItem, parent_lookup: ParentLookup) -> PathEntry | None:
    """Return the parent of ``raw``, or None for a top-level item.

    Raises ItemResolutionError when the item names a parent that the lookup
    cannot find.
    """
    if raw.parent is None:
        return None
    parent = parent_lookup(raw.parent)
    if parent is None:
        msg = f"parent idx {raw.parent} is not in list"
        raise ItemResolutionError(msg)
    return parent


def resolve_item(
    raw: RawItem,
    base_url: str,
    parent_lookup: ParentLookup,
) -> tuple[str, ResolvedItem] | None:
    """Compute the fully-qualified key and documentation URL of ``raw``.

    Returns None for kinds that are not indexed (extern crates, primitives
    and keywords). ``raw.path`` must already be backfilled.
    """
    parent = find_parent(raw, parent_lookup)

    if raw.kind in IGNORED_KINDS:
        return None

    if raw.kind == ItemType.MOD:
        key = join_key(raw.path, raw.name)
        url = join_url(base_url, raw.path, raw.name, "index.html")
        return key, ResolvedItem(raw.kind, url, raw.description)

    if parent is None:
        key = join_key(raw.path, raw.name)
        page = f"{raw.kind.to_url_slug()}.{raw.name}.html"
        url = join_url(base_url, raw.path, page)
    elif parent.kind == ItemType.PRIMITIVE:
        key = join_key(parent.name, raw.name)
        url = format_url(
            base_url, raw.path, ItemType.PRIMITIVE, parent.name, raw.kind, raw.name
        )
    elif raw.kind == ItemType.STRUCTFIELD and parent.kind == ItemType.VARIANT:
        # The last path segment is the enum that owns the variant
        container_path, sep, enum_name = raw.path.rpartition(PATH_SEPARATOR)
        if not sep:
            msg = f"failed to split struct field variant path {raw.path!r}"
            raise ItemResolutionError(msg)
        key = join_key(raw.path, parent.name, raw.name)
        url = format_url(
            base_url,
            container_path,
            ItemType.VARIANT,
            raw.name,
            ItemType.VARIANT,
            f"{enum_name}.field.{raw.name}",
        )
    else:
        key = join_key(raw.path, parent.name, raw.name)
        url = format_url(
            base_url, raw.path, parent.kind, parent.name, raw.kind, raw.name
        )

    return key, ResolvedItem(raw.kind, url, raw.description)
