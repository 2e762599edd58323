"""Helpers for building rustdoc page URLs and item keys."""

from rustdoc_index.item_type import ItemType

PATH_SEPARATOR = "::"


def join_key(*parts: str) -> str:
    """Join path components into a ``::`` delimited key, skipping empty ones."""
    return PATH_SEPARATOR.join(p for p in parts if p)


def join_url(base_url: str, path: str, *tail: str) -> str:
    """Build ``<base>/<segment>/.../<tail>`` from a ``::`` delimited path.

    Each module in ``path`` becomes one directory, the way rustdoc lays out
    its output. Empty segments are skipped.
    """
    parts = [base_url.rstrip("/"), *path.split(PATH_SEPARATOR), *tail]
    return "/".join(p for p in parts if p)


def format_url(
    base_url: str,
    path: str,
    ty: ItemType,
    name: str,
    frag_ty: ItemType,
    frag_name: str,
) -> str:
    """Build the URL of an item documented as an anchor on another item's page.

    Produces ``<base>/<path...>/<ty>.<name>.html#<frag_ty>.<frag_name>``.
    """
    page = f"{ty.to_url_slug()}.{name}.html"
    return f"{join_url(base_url, path, page)}#{frag_ty.to_url_slug()}.{frag_name}"
