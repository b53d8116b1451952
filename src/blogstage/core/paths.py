"""URL path construction for listing and pagination links."""

from blogstage.core.types import URLPath

PAGE_NUMBER_TOKEN = ":num"


def substitute(template: str, page: int) -> str:
    """Build the path of an arbitrary page from the paginate path template.

    Args:
        template: Path pattern containing the ":num" token (e.g., "/blog/page:num/")
        page: Page number to substitute

    Returns:
        Template with the token replaced, or the template unchanged if the
        token is absent
    """
    return template.replace(PAGE_NUMBER_TOKEN, str(page))


def normalize(base_path: str, path: str) -> URLPath:
    """Prefix a site-relative path with the base path.

    The two parts are concatenated as-is, then every "//" is replaced with
    "/" in a single non-overlapping left-to-right pass. Runs of three or
    more slashes are therefore not fully collapsed: "a///b" becomes "a//b".

    Args:
        base_path: Site-wide prefix (may be empty)
        path: Site-relative path

    Returns:
        Normalized URL path
    """
    return URLPath((base_path + path).replace("//", "/"))
