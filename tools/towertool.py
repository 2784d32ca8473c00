#!/usr/bin/env python3
import argparse, csv, logging, os
from flagtower.config import DEFAULT_CONFIG
from flagtower.countries import CONTINENTS
from flagtower.layout.generator import generate_layout
from flagtower.levels import LEVELS, level_at

def board_rows(layout):
    # Top layer first, one column per continent.
    layers = len(layout.columns[0]) if layout.columns else 0
    return [[col[l] for col in layout.columns] for l in range(layers - 1, -1, -1)]

def write_tsv(layout, path, include_header=False):
    with open(path, 'w', newline='', encoding='utf-8') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(CONTINENTS)
        for r in board_rows(layout):
            w.writerow(r)

def _layout(level_no, seed, layers):
    config = DEFAULT_CONFIG.replace(layers_per_column=layers)
    return generate_layout(level_at(level_no - 1), seed, config=config, held_seed=0)

def cmd_emit(args):
    layout = _layout(args.level, args.seed, args.layers)
    write_tsv(layout, args.out, include_header=args.header)
    print(f"Wrote {args.out} ({layout.outcome.value}, {layout.attempts} attempts, held={layout.held})")

def cmd_golden(args):
    base = os.path.join(args.outdir, str(args.seed))
    os.makedirs(base, exist_ok=True)
    for level in LEVELS:
        layout = _layout(level.id, args.seed, args.layers)
        write_tsv(layout, os.path.join(base, f"{level.id:02d}.tsv"))
    print(f"Wrote golden pack to {base}")

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--level', type=int, required=True)
    p1.add_argument('--seed', type=int, default=DEFAULT_CONFIG.seed)
    p1.add_argument('--layers', type=int, default=DEFAULT_CONFIG.layers_per_column)
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('golden')
    p2.add_argument('--seed', type=int, default=DEFAULT_CONFIG.seed)
    p2.add_argument('--layers', type=int, default=DEFAULT_CONFIG.layers_per_column)
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_golden)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    args.func(args)

if __name__ == '__main__':
    main()
