#!/usr/bin/env python3
# Render board TSVs (as written by towertool.py) to PNGs using Pillow.

import argparse, os
from PIL import Image

from flagtower.countries import CONTINENTS, continent_of
from flagtower.grid import percent
from flagtower.render.labels import PillowLabelProvider

def read_tsv(path):
    rows = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if not line:
                continue
            cells = line.split("\t")
            if cells == list(CONTINENTS):
                continue  # header
            rows.append(cells)
    if not rows or any(len(r) != len(CONTINENTS) for r in rows):
        raise SystemExit(f"{path}: expected rows of {len(CONTINENTS)} columns.")
    return rows

def render_board(tsv_path, out_png, tile_size=48, margin=8):
    rows = read_tsv(tsv_path)
    labels = PillowLabelProvider(size=(tile_size * 2, tile_size))
    n_cols, n_rows = len(CONTINENTS), len(rows)
    w = n_cols * tile_size * 2 + 2 * margin
    h = (n_rows + 1) * tile_size + 2 * margin
    canvas = Image.new("RGBA", (w, h), (11, 15, 20, 255))
    for x, target in enumerate(CONTINENTS):
        x0 = margin + x * tile_size * 2 + tile_size // 2
        for y, row in enumerate(rows):
            code = row[x]
            img = labels.render_cube(code, continent_of(code)).resize((tile_size, tile_size))
            canvas.paste(img, (x0, margin + y * tile_size), img)
        matched = sum(1 for row in rows if continent_of(row[x]) == target)
        label = labels.render_text(target, f"{percent(matched, n_rows)}%")
        canvas.paste(label, (margin + x * tile_size * 2, margin + n_rows * tile_size), label)
    folder = os.path.dirname(out_png)
    if folder:
        os.makedirs(folder, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, required=True, help="Golden pack seed (directory name)")
    ap.add_argument("--indir", type=str, default="data/golden_boards", help="Directory containing TSVs")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=48, help="Cube size in pixels")
    args = ap.parse_args()

    set_dir = os.path.join(args.indir, str(args.seed))
    names = sorted(n for n in os.listdir(set_dir) if n.endswith(".tsv"))
    for name in names:
        png = os.path.join(args.outdir, str(args.seed), name[:-4] + ".png")
        render_board(os.path.join(set_dir, name), png, tile_size=args.tile)
    print(f"Wrote PNGs to {os.path.join(args.outdir, str(args.seed))}")

if __name__ == "__main__":
    main()
