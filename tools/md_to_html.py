#!/usr/bin/env python3
"""
md_to_html.py

Convert a blog post (.md with YAML front matter) into the post page
(index.html) by filling the site template, then print the publishing
checklist.

Usage:
  python tools/md_to_html.py posts/DD-MM-YYYY/blog.md [-o OUTPUT.html]
      [--template template.html] [--json]

Defaults:
  - output: index.html next to the markdown file
  - template: template.html next to this script

Required front matter: title, date (YYYY-MM-DD), category, excerpt.
Optional: id.

Requires the 'Markdown', 'beautifulsoup4', 'python-frontmatter' and 'PyYAML'
packages:
  pip install markdown beautifulsoup4 python-frontmatter pyyaml
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import frontmatter
import yaml

import renderer
import templater
from post_meta import MetadataError, PostMeta, build_post_meta


DEFAULT_TEMPLATE = Path(__file__).resolve().with_name("template.html")
OUTPUT_NAME = "index.html"


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _write_text(path: Path, text: str) -> None:
    path.write_text(text, encoding="utf-8", newline="\n")


def split_front_matter(markdown_text: str) -> tuple[dict, str]:
    """Return (metadata, body).

    The front matter is a YAML block between two '---' lines at the very top
    of the file (a leading BOM is ignored). A file without one, or with an
    unclosed one, yields empty metadata and the whole text as body.
    """
    post = frontmatter.loads(markdown_text.lstrip("\ufeff"))
    return dict(post.metadata), post.content


def convert(markdown_text: str, template: str,
            palette=renderer.HEADING_COLORS) -> tuple[str, PostMeta]:
    """Render a whole post against template. Pure: no file access."""
    metadata, body = split_front_matter(markdown_text)
    meta = build_post_meta(metadata, body)
    html_content = renderer.render(renderer.parse_nodes(body), palette)
    document = templater.fill(template, meta.placeholders(html_content), banner_date=meta.date)
    return document, meta


def generate(md_path: Path, template_path: Path = DEFAULT_TEMPLATE,
             out_path: Path | None = None) -> tuple[Path, PostMeta]:
    markdown_text = _read_text(md_path)
    template = _read_text(template_path)
    document, meta = convert(markdown_text, template)
    out_path = out_path or md_path.with_name(OUTPUT_NAME)
    _write_text(out_path, document)
    return out_path, meta


def print_checklist(meta: PostMeta, out_path: Path) -> None:
    print("\n✓ Success! Your post is cooked. Here's your final checklist:")

    print("\n1. Copy this JSON object and paste it at the TOP of the array in `/posts/all-posts.json`:\n")
    print(json.dumps(meta.index_record(), indent=2, ensure_ascii=False) + ",")

    print("\n2. Make sure you've uploaded your images to the correct paths:\n")
    print(f"   - Banner:    {meta.banner_url}")
    print(f"   - Thumbnail: {meta.thumbnail_url}")

    print("\n3. Commit and push the following new/updated files:\n")
    try:
        shown = out_path.resolve().relative_to(Path.cwd())
    except ValueError:
        shown = out_path
    print(f"   - {shown}")
    print("   - posts/all-posts.json")


def warn_unresolved(out_path: Path) -> None:
    leftovers = templater.unresolved_placeholders(_read_text(out_path))
    if leftovers:
        print(f"⚠ unresolved placeholders in {out_path}: {', '.join(leftovers)}", file=sys.stderr)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert a Markdown post to its templated HTML page")
    parser.add_argument("input", type=Path, help="Input .md file path")
    parser.add_argument("-o", "--output", type=Path, help="Output .html file path (default: index.html beside input)")
    parser.add_argument("--template", type=Path, default=DEFAULT_TEMPLATE, help="Template with [PLACEHOLDER] tokens")
    parser.add_argument("--json", action="store_true", help="Only print the posts index record as JSON")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    ns = parse_args(sys.argv[1:] if argv is None else argv)

    if not ns.json:
        print(f"↻ generating: {ns.input}")

    for path in (ns.input, ns.template):
        if not path.exists():
            print(f"✗ Error: file not found: {path}", file=sys.stderr)
            return 2

    try:
        out_path, meta = generate(ns.input, ns.template, ns.output)
    except MetadataError as exc:
        print(f"✗ Error: {ns.input}: {exc}", file=sys.stderr)
        return 1
    except (ValueError, yaml.YAMLError) as exc:
        print(f"✗ Error: could not convert {ns.input}: {exc}", file=sys.stderr)
        return 1

    warn_unresolved(out_path)
    if ns.json:
        print(json.dumps(meta.index_record(), indent=2, ensure_ascii=False))
    else:
        print_checklist(meta, out_path)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
