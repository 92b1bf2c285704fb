from __future__ import annotations
import argparse, logging, sys, json

from dmitri import Engine
from dmitri import config as CFG
from dmitri.models import RunOptions, parse_color
from dmitri.loader import read_candidates
from dmitri.raster import FontLoadError, load_font


def _positive_int(text: str) -> int:
    v = int(text)
    if v <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0: {text}")
    return v


def _non_negative_int(text: str) -> int:
    v = int(text)
    if v < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {text}")
    return v


def _positive_float(text: str) -> float:
    v = float(text)
    if v <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0: {text}")
    return v


def _color(text: str):
    try:
        return parse_color(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dmitri", description="Type-to-filter launcher bar")
    p.add_argument("-f", "--font", default=CFG.FONT_NAME, help="Font name or path")
    p.add_argument("-s", "--size", type=_positive_int, default=CFG.FONT_SIZE, help="Font size in pixels")
    p.add_argument("-c", "--color", type=_color, default=CFG.COLOR, help="Primary color (#rrggbb or r,g,b)")
    p.add_argument("-m", "--margin", type=_non_negative_int, default=CFG.MARGIN, help="Margin in pixels")
    p.add_argument("-w", "--weight", type=_positive_float, default=CFG.PRECISE_WEIGHT,
                   help="Substring boost weight")
    p.add_argument("-k", type=_positive_int, default=CFG.TOP_K, help="Matches kept per query")
    p.add_argument("--dirs", nargs="+", default=None, help="Directories to scan (default: $PATH)")
    p.add_argument("--stdin", action="store_true", help="Read candidates from stdin, one per line")
    p.add_argument("--q", default=None, help="Rank a single query and print it; no window")
    p.add_argument("--json", action="store_true", help="Emit JSON rows (with --q)")
    p.add_argument("--verbose", action="store_true")
    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    if args.verbose or CFG.VERBOSE:
        logging.basicConfig(level=logging.INFO)
        CFG.VERBOSE = True

    opts = RunOptions(
        fontname=args.font,
        fontsize=args.size,
        color=args.color,
        margin=args.margin,
        precise_weight=args.weight,
        top_k=args.k,
    )

    eng = Engine(opts)
    try:
        if args.stdin:
            eng.build(candidates=read_candidates(sys.stdin))
        else:
            eng.build(args.dirs)

        if args.q is not None:
            rows = eng.score(args.q)
            if args.json:
                print(json.dumps([r.__dict__ for r in rows], ensure_ascii=False, indent=2))
            elif not rows:
                print("(no matches)")
            else:
                print("#  Score  Candidate")
                for i, r in enumerate(rows, 1):
                    print(f"{i:<2} {r.score:<6.3f} {r.candidate}")
            return 0

        try:
            font = load_font(opts.fontname, opts.fontsize)
        except FontLoadError as exc:
            print(f"dmitri: {exc}", file=sys.stderr)
            return 2

        from .window import run
        out = run(eng, opts, font=font)
        if out is None:
            return 1
        print(out)
        return 0
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
