#!/usr/bin/env python3
"""
Mystic — Sacred Geometry Animation
CLI entry point. Also importable as a library.

Usage:
    python mystic.py list-effects
    python mystic.py list-presets --effect treeoflife
    python mystic.py info chakramandala
    python mystic.py generate treeoflife --preset Ethereal --seed 7 --out job.json
    python mystic.py render job.json --frames 120 --width 1024 --height 1024 --out frames/
    python mystic.py preview job.json --frame 30
"""

import sys
import os
import json
import logging
import argparse

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from core.recipe import load_recipe, save_recipe
from core.render import render_frame, render_sequence, save_frame
from core.safety import check_animation, validate_render_request
from effects import EFFECTS, CATEGORIES, generate_settings, list_effects, new_settings
from presets import BUILT_IN_PRESETS, get_preset, get_presets_for_effect

__version__ = "0.1.0"

logger = logging.getLogger("mystic")

MAX_PARAMS = 50


def _parse_param_value(val: str):
    """Parse a CLI value as JSON (numbers, booleans, lists, objects), else keep the string."""
    try:
        return json.loads(val)
    except ValueError:
        return val


def _parse_params(pairs) -> dict:
    params = {}
    for pair in pairs or []:
        if "=" not in pair:
            raise ValueError(f"Expected key=value, got: {pair}")
        key, val = pair.split("=", 1)
        params[key.strip()] = _parse_param_value(val.strip())
    if len(params) > MAX_PARAMS:
        raise ValueError(f"Too many params (max {MAX_PARAMS})")
    return params


def cmd_list_effects(args):
    """List all available effects, grouped by category."""
    total = 0
    for cat_key, cat_label in CATEGORIES.items():
        effects = list_effects(category=cat_key)
        if not effects:
            continue
        total += len(effects)
        print(f"\n  {cat_label} ({len(effects)})")
        print(f"  {'—' * 50}")
        for e in effects:
            geo = e["geometry"]
            print(f"    {e['name']:15s} — {e['description']}")
            print(f"    {'':15s}   {geo['node_count']} nodes, {geo['path_count']} paths")
    print(f"\n  Total: {total} effects")
    print(f"  Use 'mystic info <effect>' for details.\n")


def cmd_list_presets(args):
    """List built-in presets, optionally for one effect."""
    presets = get_presets_for_effect(args.effect) if args.effect else BUILT_IN_PRESETS
    print(f"\n  Presets ({len(presets)} available)")
    print(f"  {'—' * 50}")
    for p in presets:
        print(f"    {p['name']:25s} [{p['effect']:13s}] {p['category']}")
        print(f"    {'':25s} {p['description']}")
    print(f"\n  Usage: mystic generate <effect> --preset <name>\n")


def cmd_info(args):
    """Show detailed info about a single effect."""
    name = args.effect_name
    if name not in EFFECTS:
        matches = [n for n in EFFECTS if name in n]
        if matches:
            print(f"Unknown effect: {name}. Did you mean: {', '.join(matches)}?")
        else:
            print(f"Unknown effect: {name}. Use 'mystic list-effects' to see all.")
        return

    entry = EFFECTS[name]
    cat = entry.get("category", "other")
    print(f"\n  {name}")
    print(f"  {'—' * 40}")
    print(f"  Category:    {CATEGORIES.get(cat, cat)}")
    print(f"  Description: {entry['description']}")
    print(f"\n  Key parameters:")
    for k, v in entry["params"].items():
        print(f"    {k:30s} = {v}")
    presets = [p["name"] for p in get_presets_for_effect(name)]
    print(f"\n  Presets: {', '.join(presets) or 'none'}")
    print(f"\n  Example:")
    print(f"    mystic generate {name} --seed 42 --out job.json")
    print()


def cmd_generate(args):
    """Resolve every random choice once and write a recipe."""
    overrides = {}
    if args.preset:
        preset = get_preset(args.preset)
        if preset is None:
            raise ValueError(f"Unknown preset: {args.preset}")
        if preset["effect"] != args.effect:
            raise ValueError(f"Preset '{preset['name']}' is for {preset['effect']}, not {args.effect}")
        overrides.update(preset["settings"])
    overrides.update(_parse_params(args.params))

    settings = new_settings(args.effect, overrides)
    check_animation(settings.animation)
    settings = generate_settings(args.effect, settings, rng=args.seed)
    save_recipe(args.out, args.effect, settings.to_dict())
    print(f"  Generated {args.effect} → {args.out}")
    print(f"  Blend mode: {settings.layer_blend_mode}")


def cmd_render(args):
    """Render every frame of a recipe to PNGs."""
    effect, settings = load_recipe(args.recipe)
    validate_render_request(args.width, args.height, args.frames)

    def progress(i, total):
        if args.verbose or (i + 1) % 10 == 0 or i + 1 == total:
            print(f"  [{i + 1}/{total}]", end="\r", flush=True)

    paths = render_sequence(effect, settings, args.frames, args.width, args.height,
                            args.out, progress_callback=progress)
    print(f"\n  Rendered {len(paths)} frames → {args.out}")


def cmd_preview(args):
    """Render a single frame of a recipe."""
    effect, settings = load_recipe(args.recipe)
    validate_render_request(args.width, args.height, args.frames)
    if not 0 <= args.frame < args.frames:
        raise ValueError(f"Frame {args.frame} out of range (0-{args.frames - 1})")
    frame = render_frame(effect, settings, args.frame, args.frames, args.width, args.height)
    out = args.out or os.path.splitext(args.recipe)[0] + f"_frame{args.frame:04d}.png"
    save_frame(frame, out)
    print(f"  Preview → {out}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="mystic",
        description="Mystic — phase-animated sacred geometry",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command")

    # list-effects
    sub.add_parser("list-effects", help="List all available effects")

    # list-presets
    p = sub.add_parser("list-presets", help="List built-in presets")
    p.add_argument("--effect", choices=sorted(EFFECTS), help="Only presets for this effect")

    # info
    p = sub.add_parser("info", help="Show detailed info about an effect")
    p.add_argument("effect_name", help="Effect name")

    # generate
    p = sub.add_parser("generate", help="Resolve random choices and write a recipe")
    p.add_argument("effect", choices=sorted(EFFECTS), help="Effect name")
    p.add_argument("--preset", help="Start from a built-in preset")
    p.add_argument("--seed", type=int, help="Random seed (same seed, same recipe)")
    p.add_argument("--params", nargs="*", help="Setting overrides as key=value (values parsed as JSON)")
    p.add_argument("--out", required=True, help="Recipe JSON path")

    # render
    p = sub.add_parser("render", help="Render a recipe to PNG frames")
    p.add_argument("recipe", help="Recipe JSON path")
    p.add_argument("--frames", type=int, default=60, help="Frames in one loop")
    p.add_argument("--width", type=int, default=512)
    p.add_argument("--height", type=int, default=512)
    p.add_argument("--out", required=True, help="Output directory")

    # preview
    p = sub.add_parser("preview", help="Render one frame of a recipe")
    p.add_argument("recipe", help="Recipe JSON path")
    p.add_argument("--frame", type=int, default=0, help="Frame number")
    p.add_argument("--frames", type=int, default=60, help="Frames in one loop")
    p.add_argument("--width", type=int, default=512)
    p.add_argument("--height", type=int, default=512)
    p.add_argument("--out", help="PNG path (default: next to the recipe)")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "list-effects": cmd_list_effects,
        "list-presets": cmd_list_presets,
        "info": cmd_info,
        "generate": cmd_generate,
        "render": cmd_render,
        "preview": cmd_preview,
    }

    if args.command in commands:
        try:
            commands[args.command](args)
        except Exception as e:
            logger.debug("Command %s failed", args.command, exc_info=True)
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
