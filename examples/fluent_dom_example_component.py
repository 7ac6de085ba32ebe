"""Demonstrates element assertions against a rendered jinja2 component."""

import jinja2

from fluent_dom import AssertionFailedError, assertion_scope, fragment, should
from fluent_dom.markup import parse_element

CARD = jinja2.Template(
    """
    <article class="card {{ 'card--featured' if featured }}" data-test-id="card-{{ slug }}">
      <h2 title="{{ title }}">{{ title }}</h2>
      <a href="/posts/{{ slug }}" rel="noopener nofollow" target="_blank">Read more</a>
    </article>
    """
)


def render_card(**context) -> str:
    return CARD.render(**context)


def example_passing_chain():
    card = parse_element(render_card(title="Release notes", slug="release-notes", featured=True))

    should(card).have_tag("article").and_.have_class("card--featured").and_.have_data_test_id(
        "card-release-notes"
    )
    should(card.a).have_href("/posts/release-notes").and_.have_rel("nofollow").and_.have_target("_blank")
    should(card.h2).have_markup(fragment('<h2 title="{{ t }}">{{ t }}</h2>', t="Release notes"))


def example_collected_failures():
    card = parse_element(render_card(title="Draft", slug="draft", featured=False))

    try:
        with assertion_scope("draft card"):
            should(card).have_class("card--featured", "drafts are never featured")
            should(card.a).have_href("/posts/draft").and_.have_rel("external")
    except AssertionFailedError as exc:
        for result in exc.results:
            print(result.message)


if __name__ == "__main__":
    example_passing_chain()
    example_collected_failures()
