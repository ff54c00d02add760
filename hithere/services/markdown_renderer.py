import html as html_lib
import re
from typing import Iterator, List

import markdown
from markdown.extensions.toc import nest_toc_tokens

TOC_CLASS = "toc"

MD_EXTENSIONS = [
    "extra",
    "toc",
    "pymdownx.tilde",
    "pymdownx.tasklist",
    "pymdownx.magiclink",
]

MD_EXTENSION_CONFIGS = {
    "toc": {"toc_class": TOC_CLASS},
    "pymdownx.tilde": {"subscript": False},
}

# Heading under which the table of contents is placed, when present
CONTENTS_HEADING = re.compile(r"^(toc|table[ -]of[ -]contents?)$", re.IGNORECASE)


def render_markdown(body: str) -> str:
    """
    Render a post body to HTML with a table of contents built from its headings.

    A ``[TOC]`` marker in the body places the table itself. Otherwise it goes
    under a "Table of contents" (or "TOC") heading, listing the headings that
    follow it, or at the top of the document.

    The output is not sanitized: post sources are trusted content.
    """
    md = markdown.Markdown(
        extensions=MD_EXTENSIONS, extension_configs=MD_EXTENSION_CONFIGS
    )
    html = md.convert(body)
    if not md.toc_tokens or f'<div class="{TOC_CLASS}">' in html:
        return html
    return _insert_toc(html, md.toc, md.toc_tokens)


def _insert_toc(html: str, toc: str, tokens: List[dict]) -> str:
    flat = list(_walk(tokens))
    for index, token in enumerate(flat):
        if not CONTENTS_HEADING.match(token["name"].strip()):
            continue
        anchor = html.find(f'id="{token["id"]}"')
        closing = f"</h{token['level']}>"
        end = html.find(closing, anchor) if anchor != -1 else -1
        if end == -1:
            continue
        following = flat[index + 1 :]
        if not following:
            return html
        end += len(closing)
        return f"{html[:end]}\n{_build_toc(following)}{html[end:]}"
    return f"{toc}{html}"


def _build_toc(tokens: List[dict]) -> str:
    entries = nest_toc_tokens(
        [{"level": t["level"], "id": t["id"], "name": t["name"]} for t in tokens]
    )
    return f'<div class="{TOC_CLASS}">\n{_build_list(entries)}</div>\n'


def _build_list(entries: List[dict]) -> str:
    items = []
    for entry in entries:
        link = f'<a href="#{entry["id"]}">{html_lib.escape(entry["name"], quote=False)}</a>'
        nested = f"\n{_build_list(entry['children'])}" if entry["children"] else ""
        items.append(f"<li>{link}{nested}</li>\n")
    return f"<ul>\n{''.join(items)}</ul>\n"


def _walk(tokens: List[dict]) -> Iterator[dict]:
    for token in tokens:
        yield token
        yield from _walk(token.get("children", []))
