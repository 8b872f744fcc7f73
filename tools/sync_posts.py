"""
Scan every post under posts/, find each blog.md, and make sure its
index.html is up to date with the Markdown and the template.
"""
import argparse, pathlib, sys

import yaml

import md_to_html

POSTS  = pathlib.Path("posts")
SOURCE = "blog.md"

def is_stale(md: pathlib.Path, out: pathlib.Path, template: pathlib.Path) -> bool:
    if not out.exists():
        return True
    built = out.stat().st_mtime
    return md.stat().st_mtime > built or template.stat().st_mtime > built

def sync(posts: pathlib.Path, template: pathlib.Path, force: bool) -> int:
    """Regenerate stale posts; returns the number of failures."""
    failures = 0
    for md in sorted(posts.glob(f"*/{SOURCE}")):
        out = md.with_name(md_to_html.OUTPUT_NAME)
        if not force and not is_stale(md, out, template):
            print(f"✓ up to date: {md}")
            continue

        print(f"↻ rendering : {md}")
        try:
            out, meta = md_to_html.generate(md, template, out)
        except (ValueError, yaml.YAMLError, OSError) as e:
            print(f"✗ failed    : {md} - {e}", file=sys.stderr)
            failures += 1
            continue
        print(f"✓ saved     : {out} ({meta.reading_time} min read)")
    return failures

def main(argv=None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--posts", type=pathlib.Path, default=POSTS,
                    help="directory holding one folder per post")
    ap.add_argument("--template", type=pathlib.Path, default=md_to_html.DEFAULT_TEMPLATE)
    ap.add_argument("--force", action="store_true",
                    help="re-render even if index.html is newer than blog.md")
    args = ap.parse_args(argv)
    return 1 if sync(args.posts, args.template, args.force) else 0

if __name__ == "__main__":
    sys.exit(main())
