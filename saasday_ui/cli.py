import argparse
import sys
from pathlib import Path

from saasday_ui.card import render_day_card, render_day_page


def build_parser():
    ap = argparse.ArgumentParser(description="Render a 'Day N of Building a SaaS' card as HTML")
    ap.add_argument("--day", required=True, help="Day label, e.g. 1")
    ap.add_argument("--item", action="append", default=[], dest="items", help="Checklist item (repeat for more, order is kept)")
    ap.add_argument("--title", default=None, help="Page title (only with --page)")
    ap.add_argument("--page", action="store_true", help="Wrap the card in a full HTML document")
    ap.add_argument("--output", "-o", default=None, help="Write to this file instead of stdout")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.page:
        html = render_day_page(args.day, args.items, title=args.title)
    else:
        html = render_day_card(args.day, args.items)

    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(html, encoding="utf-8")
        print(f"[CARD] Wrote {out}")
    else:
        sys.stdout.write(html)
    return 0


if __name__ == "__main__":
    sys.exit(main())
