from __future__ import annotations
import argparse, json, logging, sys
from datetime import timedelta

from .binary.errors import ParseError
from .sources import PathSource, decode_source, is_fresh

log = logging.getLogger("vwp48")


def _fmt(vec) -> str | None:
    return None if vec is None else str(vec)


def _load(args):
    vwp = decode_source(PathSource(args.input))
    stale = args.max_age is not None and not is_fresh(vwp.valid_time, timedelta(minutes=args.max_age))
    if stale:
        log.warning("%s: valid %s is older than %s minutes", args.input, vwp.valid_time, args.max_age)
    return vwp, stale


def cmd_info(args):
    vwp, stale = _load(args)
    print(json.dumps(vwp.model_dump(mode="json"), indent=2))
    return 1 if stale else 0


def cmd_kinematics(args):
    vwp, stale = _load(args)
    prof = vwp.profile
    storm = prof.bunkers()
    out = {
        "valid_time": vwp.valid_time.isoformat(),
        "observations": len(prof),
        "mean_wind": _fmt(prof.mean_wind(args.top)),
        "shear": _fmt(prof.wind_shear(args.bottom, args.top)),
        "bunkers_right": _fmt(storm[0]) if storm else None,
        "bunkers_left": _fmt(storm[1]) if storm else None,
    }
    print(json.dumps(out, indent=2))
    return 1 if stale else 0


def cmd_pages(args):
    from .binary.reader import read_pages
    with open(args.input, "rb") as fh:
        pages = read_pages(fh)
    for i, page in enumerate(pages):
        print(f"--- page {i + 1}/{len(pages)} ({len(page)} lines)")
        for line in page:
            print(line)
    return 0


def cmd_plot(args):
    import matplotlib.pyplot as plt
    from .viz import plot_hodograph

    vwp, _ = _load(args)
    if len(vwp.profile) < 2:
        print("Not enough observations for a hodograph", file=sys.stderr)
        return 1
    plot_hodograph(vwp)
    if args.output:
        plt.savefig(args.output)
    else:
        plt.show()
    return 0


def build_parser():
    p = argparse.ArgumentParser(prog="vwp48", description="NEXRAD VAD Wind Profile (product 48) utilities")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    p.add_argument("--max-age", type=float, default=None, metavar="MINUTES",
                   help="Flag products whose valid time is older than this (exit status 1)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("info", help="print station, valid time and profile as JSON")
    sp.add_argument("input", help="Path to a product 48 file")
    sp.set_defaults(func=cmd_info)

    sp = sub.add_parser("kinematics", help="mean wind, shear and Bunkers storm motion")
    sp.add_argument("input", help="Path to a product 48 file")
    sp.add_argument("--top", type=float, default=6.0, help="Layer top in km (default 6)")
    sp.add_argument("--bottom", type=float, default=0.0, help="Shear layer bottom in km (default 0)")
    sp.set_defaults(func=cmd_kinematics)

    sp = sub.add_parser("pages", help="dump the tabular text pages")
    sp.add_argument("input")
    sp.set_defaults(func=cmd_pages)

    sp = sub.add_parser("plot", help="hodograph of the profile")
    sp.add_argument("input")
    sp.add_argument("-o", "--output", default=None, help="Write the figure here instead of showing it")
    sp.set_defaults(func=cmd_plot)

    return p


def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return ns.func(ns)
    except ParseError as e:
        print(f"{ns.input}: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
