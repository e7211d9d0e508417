# -*- coding: utf-8 -*-
from __future__ import annotations
import argparse, json, sys, pathlib

import numpy as np
import shapely
import yaml

from .config import GenerationParameters, dump_parameters, load_parameters
from .generators import rand
from .utils.logging import configure_logging

KINDS = {
    "point": shapely.Point,
    "line_string": shapely.LineString,
    "polygon": shapely.Polygon,
    "multi_point": shapely.MultiPoint,
    "multi_line_string": shapely.MultiLineString,
    "multi_polygon": shapely.MultiPolygon,
}


def _load_params(args) -> GenerationParameters:
    return load_parameters(args.config)


def _write(text: str, out: str | None) -> None:
    if not out:
        sys.stdout.write(text + "\n")
        return
    pathlib.Path(out).parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        f.write(text + "\n")


def _as_wkt(shapes) -> str:
    return "\n".join(shapely.to_wkt(s, rounding_precision=-1) for s in shapes)


def _as_geojson(shapes) -> str:
    features = [
        {"type": "Feature", "properties": {"index": i}, "geometry": json.loads(shapely.to_geojson(s))}
        for i, s in enumerate(shapes)
    ]
    return json.dumps({"type": "FeatureCollection", "features": features}, ensure_ascii=False)


def cmd_generate(args):
    configure_logging(level=args.log_level)
    try:
        params = _load_params(args)
    except (FileNotFoundError, TypeError, ValueError) as exc:
        print(f"georand: {exc}", file=sys.stderr)
        return 2

    rng = np.random.default_rng(args.seed)
    kind = KINDS[args.kind]
    shapes = [rand(kind, rng, params) for _ in range(args.count)]
    text = _as_geojson(shapes) if args.format == "geojson" else _as_wkt(shapes)
    _write(text, args.out)
    return 0


def cmd_config(args):
    try:
        params = _load_params(args)
    except (FileNotFoundError, TypeError, ValueError) as exc:
        print(f"georand: {exc}", file=sys.stderr)
        return 2
    _write(yaml.safe_dump(dump_parameters(params), sort_keys=False).rstrip("\n"), args.out)
    return 0


def make_parser():
    p = argparse.ArgumentParser(prog="georand")
    sub = p.add_subparsers(dest="cmd", required=True)

    pg = sub.add_parser("generate", help="Generate random shapes")
    pg.add_argument("--kind", choices=sorted(KINDS), default="polygon")
    pg.add_argument("--count", type=int, default=1, help="number of shapes to emit")
    pg.add_argument("--seed", type=int, default=None, help="seed for numpy.random.default_rng")
    pg.add_argument("--config", default=None, help="YAML parameter file")
    pg.add_argument("--format", choices=("wkt", "geojson"), default="wkt")
    pg.add_argument("--out", default=None, help="output file (stdout if omitted)")
    pg.add_argument("--log-level", dest="log_level", default=None,
                    help="none|info|debug (GEORAND_LOG_LEVEL wins if set)")
    pg.set_defaults(func=cmd_generate)

    pc = sub.add_parser("config", help="Print the effective parameters as YAML")
    pc.add_argument("--config", default=None, help="YAML parameter file")
    pc.add_argument("--out", default=None, help="output file (stdout if omitted)")
    pc.set_defaults(func=cmd_config)

    return p


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    parser = make_parser()
    ns = parser.parse_args(argv)
    return ns.func(ns)


if __name__ == "__main__":
    raise SystemExit(main())
