"""URL segment joining."""

from urllib.parse import parse_qsl, urlencode


def join_links(*parts: object) -> str:
    """Join URL segments with exactly one slash between each.

    Empty and ``None`` segments are skipped; numbers (including ``0``) are
    converted to strings. Query strings found in any segment are merged into a
    single trailing query (later keys win) and the last fragment is kept.

    Args:
        *parts: URL segments, with or without leading/trailing slashes

    Returns:
        Joined URL string

    Example:
        ```python
        join_links("admin/", "/security", "EditForm?x=1", 2)
        # Returns: "admin/security/EditForm/2?x=1"
        ```
    """
    result = ""
    query_args: dict[str, str] = {}
    fragment: str | None = None

    for part in parts:
        if part is None or isinstance(part, bool):
            continue
        text = str(part)
        if "#" in text:
            text, fragment = text.split("#", 1)
        if "?" in text:
            text, query = text.split("?", 1)
            query_args.update(parse_qsl(query, keep_blank_values=True))
        if not text:
            continue
        if not result:
            result = text
        else:
            result = f"{result.rstrip('/')}/{text.lstrip('/')}"

    if query_args:
        result += "?" + urlencode(query_args)
    if fragment:
        result += f"#{fragment}"
    return result
