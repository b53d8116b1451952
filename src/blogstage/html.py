"""HTML fragment output for rendered listing pages.

Produces the post previews and Bootstrap pagination markup embedded by
the site layout. Link targets are written exactly as rendered.
"""

from html import escape

from blogstage.core.links import Link
from blogstage.core.listing import PostBlock, TaxonomyGroup
from blogstage.core.pagination import ControlState, NavBlock, NavControl
from blogstage.core.renderer import RenderedPage


def render_html(page: RenderedPage) -> str:
    """Render a listing page as an HTML fragment.

    Args:
        page: Rendered listing page

    Returns:
        HTML with one post preview per block, followed by the pagination
        list when the page has navigation
    """
    parts = [_post_html(block) for block in page.posts]
    if page.navigation is not None:
        parts.append(_navigation_html(page.navigation))
    return "\n".join(parts) + "\n"


def _link_html(link: Link, css_class: str | None = None) -> str:
    class_attr = f' class="{css_class}"' if css_class else ""
    return f'<a href="{escape(link.path)}"{class_attr}>{escape(link.label)}</a>'


def _post_html(block: PostBlock) -> str:
    lines = [
        '<div class="post-preview">',
        f'  <h2 class="post-title">{_link_html(block.title)}</h2>',
    ]
    if block.taxonomy is not None:
        groups = " ".join(_taxonomy_group_html(group) for group in block.taxonomy)
        lines.append(f'  <p class="post-meta">{groups}</p>')
    # Excerpts arrive pre-rendered
    lines.append(f'  <div class="post-excerpt">{block.excerpt}</div>')
    lines.append(f"  {_link_html(block.read_more, 'read-more')}")
    lines.append("</div>")
    return "\n".join(lines)


def _taxonomy_group_html(group: TaxonomyGroup) -> str:
    parts = []
    if group.category is not None:
        parts.append(_link_html(group.category))
    if group.tags:
        parts.append('<i class="fa fa-tags"></i>')
        parts.extend(_link_html(tag) for tag in group.tags)
    return " ".join(parts)


def _navigation_html(nav: NavBlock) -> str:
    items = [_control_html(nav.previous)]
    items.extend(_control_html(control) for control in nav.pages)
    items.append(_control_html(nav.next))
    body = "\n".join(f"  {item}" for item in items)
    return f'<ul class="pagination">\n{body}\n</ul>'


def _control_html(control: NavControl) -> str:
    label = escape(control.label)
    if control.state is ControlState.ACTIVE:
        return f'<li class="active"><span>{label}</span></li>'
    if control.state is ControlState.DISABLED:
        return f'<li class="disabled"><span>{label}</span></li>'
    return f'<li><a href="{escape(control.path or "")}">{label}</a></li>'
