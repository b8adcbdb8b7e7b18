"""MazeForge CLI entry point.

Provides subcommands for running the level HTTP server, generating a single
level to stdout or a file, and building the whole catalog. Accepts
configuration via flags and environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import random
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()
# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()


def _load_version() -> str:
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    MazeForge Level Generator

    Generate deterministic maze levels from a seed and shaping parameters,
    build the bundled level catalog, or serve levels over HTTP. Configuration
    can be provided via CLI flags or environment variables. If both are
    present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                            Bind address for the web server (default: 0.0.0.0)
          PORT                            Port for the web server (default: 5000)
          MAZE_ENABLE_GENERATION_METRICS  Collect generation metrics (default: 1)
          MAZE_DISABLE_CACHE              Disable the server's level cache (1 = off)
          MAZEFORGE_LOG_LEVEL             debug|info|warn|error (default: info)
          MAZEFORGE_LOG_JSON              Emit JSON log lines (1 = on)

        Examples:
          # Run the server on the default host and port
          python run.py server

          # Print catalog level 1 as JSON
          python run.py generate --level 1

          # Preview level 3 with a different seed as ASCII
          python run.py generate --level 3 --seed 42 --ascii

          # Custom level with two sculpt profiles, written to a file
          python run.py generate --size 600 --seed 99 --profile crypt --profile rings --out level.json

          # Build every catalog level and print a summary
          python run.py catalog
        """
    )

    parser = argparse.ArgumentParser(
        prog="MazeForge",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["debug", "info", "warn", "error"],
        default=None,
        help="Log threshold for this run (default: env MAZEFORGE_LOG_LEVEL or info)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"MazeForge {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    # server subcommand
    server_parser = subparsers.add_parser(
        "server",
        help="Run the level HTTP server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Serve catalog and custom levels over HTTP",
    )
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host interface to bind (default: env HOST or 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: env PORT or 5000)",
    )
    server_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode with verbose error pages",
    )
    server_parser.set_defaults(command="server")

    # generate subcommand
    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate one level (catalog or custom)",
        formatter_class=argparse.RawTextHelpFormatter,
        description=dedent(
            """
            Generate a single level. With --level the catalog definition is the
            base and any other flag overrides it; without it, unspecified
            parameters use the defaults shown below.
            """
        ),
    )
    gen_parser.add_argument("--level", type=int, default=None, help="Catalog level id")
    gen_parser.add_argument("--size", type=int, default=None, help="Board size in pixels (default: 400)")
    gen_parser.add_argument("--seed", type=int, default=None, help="32-bit seed (default: random)")
    gen_parser.add_argument("--loops", type=int, default=None, help="Loop samples (default: 22)")
    gen_parser.add_argument("--min-path", dest="min_path", type=int, default=None, help="Minimum path length in cells (default: 0)")
    gen_parser.add_argument("--min-turns", dest="min_turns", type=int, default=None, help="Minimum turn count (default: 0)")
    gen_parser.add_argument("--bias-x", dest="bias_x", type=float, default=None, help="Horizontal carve weight (default: 1.0)")
    gen_parser.add_argument("--bias-y", dest="bias_y", type=float, default=None, help="Vertical carve weight (default: 1.0)")
    gen_parser.add_argument("--straightness", type=float, default=None, help="Straight-run multiplier (default: 1.0)")
    gen_parser.add_argument(
        "--profile",
        dest="profiles",
        action="append",
        default=None,
        help="Sculpt profile, repeatable: citadel, crypt, serpent, fortress, rings (default: citadel)",
    )
    gen_parser.add_argument("--ascii", action="store_true", help="Print an ASCII preview instead of JSON")
    gen_parser.add_argument("--metrics", action="store_true", help="Include generation metrics in the JSON")
    gen_parser.add_argument("--out", default=None, help="Write JSON to this path instead of stdout")
    gen_parser.set_defaults(command="generate")

    # catalog subcommand
    cat_parser = subparsers.add_parser(
        "catalog",
        help="Build every catalog level and print a summary table",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate all catalog levels (slow: most exhaust the retry budget).",
    )
    cat_parser.add_argument(
        "--only",
        type=int,
        action="append",
        default=None,
        help="Restrict to these level ids (repeatable)",
    )
    cat_parser.set_defaults(command="catalog")

    args = parser.parse_args(argv)
    return args


_CUSTOM_DEFAULTS = {
    "size": 400,
    "loopCount": 22,
    "minPathLength": 0,
    "minTurns": 0,
    "biasX": 1.0,
    "biasY": 1.0,
    "straightness": 1.0,
    "profile": "citadel",
}


def _config_from_args(args):
    """Merge catalog base (if any), defaults and explicit flags into a LevelConfig."""
    from mazeforge.maze import LevelConfig, LevelConfigError, get_level_config

    if args.level is not None:
        base_cfg = get_level_config(args.level)
        if base_cfg is None:
            raise LevelConfigError(f"unknown level id {args.level}")
        data = base_cfg.to_dict()
    else:
        data = dict(_CUSTOM_DEFAULTS)
        data["seed"] = random.randint(1, 1_000_000)
    overrides = {
        "size": args.size,
        "seed": args.seed,
        "loopCount": args.loops,
        "minPathLength": args.min_path,
        "minTurns": args.min_turns,
        "biasX": args.bias_x,
        "biasY": args.bias_y,
        "straightness": args.straightness,
        "profile": args.profiles,
    }
    data.update({k: v for k, v in overrides.items() if v is not None})
    cfg = LevelConfig.from_dict(data)
    if args.seed is not None:
        cfg = cfg.with_seed(args.seed)
    return cfg


def _err(msg: str) -> None:
    prefix = f"{Fore.RED}[ERROR]{Style.RESET_ALL}" if _COLOR_ENABLED else "[ERROR]"
    print(f"{prefix} {msg}", file=sys.stderr)


def _run_generate(args) -> int:
    from mazeforge.maze import LevelConfigError, build_level

    try:
        cfg = _config_from_args(args)
    except LevelConfigError as exc:
        _err(str(exc))
        return 1
    level = build_level(cfg)
    if args.ascii:
        print(level.preview())
        return 0
    payload = level.to_dict(include_metrics=args.metrics)
    payload["seed"] = level.seed
    text = json.dumps(payload, indent=2)
    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        print(f"[INFO] Wrote level {level.name or level.seed} to {args.out}")
    else:
        print(text)
    return 0


def _run_catalog(args) -> int:
    from mazeforge.maze import build_level, level_configs

    configs = level_configs()
    if args.only:
        wanted = set(args.only)
        configs = [c for c in configs if c.id in wanted]
        if not configs:
            _err(f"no catalog levels match {sorted(wanted)}")
            return 1
    header = f"{'ID':>3}  {'Name':<32} {'Grid':>5} {'Path':>5} {'Turns':>5}  Result"
    print(header)
    print("-" * len(header))
    for cfg in configs:
        level = build_level(cfg, enable_metrics=True)
        m = level.metrics
        result = "FALLBACK" if m["fallback_used"] else f"attempt {m['accepted_attempt']}"
        if _COLOR_ENABLED:
            color = Fore.YELLOW if m["fallback_used"] else Fore.GREEN
            result = f"{color}{result}{Style.RESET_ALL}"
        grid = f"{level.grid_cells}"
        print(f"{cfg.id:>3}  {cfg.name:<32} {grid:>5} {m['path_length']:>5} {m['turns']:>5}  {result}")
    return 0


def main(argv: list[str]) -> int:
    # Load .env if requested (default .env if present, no error if missing)
    args = parse_args(argv)
    if args and getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        load_dotenv()
    if getattr(args, "log_level", None):
        from mazeforge.logging_utils import set_level

        set_level(args.log_level)

    mode = (getattr(args, "command", None) or "server").lower()
    if mode == "generate":
        return _run_generate(args)
    if mode == "catalog":
        return _run_catalog(args)

    # Resolve configuration from CLI flags or env vars
    env_host = os.getenv("HOST", "0.0.0.0")
    env_port = int(os.getenv("PORT", "5000"))
    host = getattr(args, "host", None) or env_host
    port = int(getattr(args, "port", None) or env_port)

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    # Import server entrypoints only after environment is ready
    from mazeforge.logging_utils import log
    from mazeforge.server import start_server

    title = (
        f"{Fore.CYAN}{Style.BRIGHT}MazeForge Level Server{Style.RESET_ALL}"
        if _COLOR_ENABLED
        else "MazeForge Level Server"
    )

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val: str | int) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    metrics_on = os.getenv("MAZE_ENABLE_GENERATION_METRICS", "1") == "1"
    cache_on = os.getenv("MAZE_DISABLE_CACHE", "0") != "1"
    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Version:'):12} {value(__version__)}",
        f"  {label('Host:'):12} {value(host)}",
        f"  {label('Port:'):12} {value(port)}",
        f"  {label('Metrics:'):12} {value('enabled' if metrics_on else 'disabled')}",
        f"  {label('Cache:'):12} {value('enabled' if cache_on else 'disabled')}",
        divider,
        "",
    ]
    print("\n".join(lines))

    debug = bool(getattr(args, "debug", False) or os.getenv("FLASK_DEBUG") == "1")
    log.info(event="listen", host=host, port=port, debug=debug)
    start_server(host=host, port=port, debug=debug)
    return 0


def _console_main() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
