"""Tests for HTML fragment output."""

from blogstage.config import SiteConfig
from blogstage.core.posts import Post
from blogstage.core.renderer import render_page
from blogstage.html import render_html


class TestRenderHtml:
    """Tests for render_html()."""

    def test__post_preview(self, make_paginator, posts, site: SiteConfig) -> None:
        """Render title, taxonomy, excerpt and read-more link."""
        html = render_html(render_page(make_paginator(1, 1, posts=posts[:1]), site))

        assert '<div class="post-preview">' in html
        assert '<a href="/2024/01/05/hello-world/">Hello World</a>' in html
        assert (
            '<p class="post-meta"><a href="/categories/#news">news</a> '
            '<i class="fa fa-tags"></i> '
            '<a href="/tags/#intro">intro</a> <a href="/tags/#meta">meta</a></p>'
        ) in html
        assert '<div class="post-excerpt"><p>First post.</p></div>' in html
        assert '<a href="/2024/01/05/hello-world/" class="read-more">Read More</a>' in html

    def test__no_taxonomy__omits_meta_line(self, make_paginator, posts, site: SiteConfig) -> None:
        """Skip the post-meta paragraph without categories and tags."""
        html = render_html(render_page(make_paginator(1, 1, posts=posts[1:2]), site))

        assert "post-meta" not in html

    def test__single_page__no_pagination(self, make_paginator, posts, site: SiteConfig) -> None:
        """Skip pagination markup for single-page listings."""
        html = render_html(render_page(make_paginator(1, 1, posts=posts), site))

        assert "pagination" not in html
        assert html.count('<div class="post-preview">') == 3

    def test__pagination_states(self, make_paginator, site: SiteConfig) -> None:
        """Render disabled, active and link items."""
        html = render_html(render_page(make_paginator(1, 3), site))

        assert (
            '<ul class="pagination">\n'
            '  <li class="disabled"><span>Previous</span></li>\n'
            '  <li class="active"><span>1</span></li>\n'
            '  <li><a href="/blog/page2/">2</a></li>\n'
            '  <li><a href="/blog/page3/">3</a></li>\n'
            '  <li><a href="/blog/page2/">Next</a></li>\n'
            "</ul>"
        ) in html

    def test__escapes_labels(self, make_paginator, site: SiteConfig) -> None:
        """Escape post titles and taxonomy labels."""
        post = Post(title="Tom & Jerry <3", url="/tj/", excerpt="", tags=("a&b",))

        html = render_html(render_page(make_paginator(1, 1, posts=(post,)), site))

        assert "Tom &amp; Jerry &lt;3" in html
        assert '<a href="/tags/#a&amp;b">a&amp;b</a>' in html
