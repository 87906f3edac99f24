"""svger command line — build, generate, lock, config, clean, serve."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from svger.config import settings
from svger.engine.errors import SvgerError
from svger.engine.generator import supported_targets
from svger.services.orchestrator import BuildSummary, FileResult, create_orchestrator


def _generation_overrides(args: argparse.Namespace) -> dict:
    overrides: dict = {}
    if args.framework:
        overrides["framework"] = args.framework
    if args.typescript is not None:
        overrides["typescript"] = args.typescript
    if args.naming:
        overrides["naming_convention"] = args.naming

    framework_options = {}
    if args.composition is not None:
        framework_options["script_setup"] = args.composition
    if args.standalone is not None:
        framework_options["standalone"] = args.standalone
    if args.signals:
        framework_options["signals"] = True
    if args.no_forward_ref:
        framework_options["forward_ref"] = False
    if framework_options:
        overrides["framework_options"] = framework_options
    return overrides


def _add_generation_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--framework", help=f"Target framework ({'|'.join(supported_targets())})")
    parser.add_argument("--typescript", dest="typescript", action="store_true", default=None,
                        help="Generate TypeScript components (default)")
    parser.add_argument("--no-typescript", dest="typescript", action="store_false",
                        help="Generate JavaScript components")
    parser.add_argument("--naming", choices=["pascal", "camel", "kebab"], help="Output filename convention")
    parser.add_argument("--composition", dest="composition", action="store_true", default=None,
                        help="Vue <script setup> (TypeScript only)")
    parser.add_argument("--no-composition", dest="composition", action="store_false",
                        help="Vue defineComponent, overriding a config that enables <script setup>")
    parser.add_argument("--standalone", dest="standalone", action="store_true", default=None,
                        help="Angular standalone component")
    parser.add_argument("--no-standalone", dest="standalone", action="store_false",
                        help="Angular module-declared component")
    parser.add_argument("--signals", action="store_true", help="Angular signal inputs")
    parser.add_argument("--no-forward-ref", action="store_true", help="React component without forwardRef")


def _print_result(r: FileResult) -> None:
    name = Path(r.source).name
    if r.success:
        suffix = " (malformed markup passed through)" if r.malformed else ""
        print(f"  ✓ {name} → {r.output_path}{suffix}")
    elif r.skipped:
        print(f"  - {name}: skipped ({r.error})")
    else:
        print(f"  ✗ {r.error}")


def _cmd_build(args: argparse.Namespace) -> int:
    orchestrator = create_orchestrator()
    summary: BuildSummary = orchestrator.build(args.src, args.out, _generation_overrides(args))
    for r in summary.results:
        _print_result(r)
    print(f"\nDone: {summary.succeeded} generated, {summary.failed} failed, {summary.skipped} skipped")
    if summary.index_path:
        print(f"Index: {summary.index_path}")
    return 0 if summary.ok else 1


def _cmd_generate(args: argparse.Namespace) -> int:
    orchestrator = create_orchestrator()
    result = orchestrator.process_file(args.svg, args.out, _generation_overrides(args))
    _print_result(result)
    return 0 if result.success or result.skipped else 1


def _cmd_lock(args: argparse.Namespace) -> int:
    locked = create_orchestrator().locks.lock(args.files)
    print(f"Locked: {', '.join(locked) or '(none)'}")
    return 0


def _cmd_unlock(args: argparse.Namespace) -> int:
    locked = create_orchestrator().locks.unlock(args.files)
    print(f"Still locked: {', '.join(locked) or '(none)'}")
    return 0


def _cmd_config(args: argparse.Namespace) -> int:
    store = create_orchestrator().config
    if args.init:
        print("Config created." if store.init() else f"Config already exists: {store.path}")
    if args.set:
        key, sep, value = args.set.partition("=")
        if not sep:
            print("--set expects key=value", file=sys.stderr)
            return 2
        store.set(key.strip(), value.strip())
        print(f"Set {key.strip()}={value.strip()}")
    if args.show or not (args.init or args.set):
        print(store.show())
    return 0


def _cmd_clean(args: argparse.Namespace) -> int:
    removed = create_orchestrator().clean(args.out)
    print(f"Removed {removed} files from {args.out}")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("svger.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svger",
        description="Convert SVG files into React, Vue, Svelte, Angular, Solid, Preact, Lit or vanilla components",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("build", help="Convert every SVG in a folder")
    p.add_argument("src", help="Folder of SVG files")
    p.add_argument("out", help="Output folder")
    _add_generation_flags(p)
    p.set_defaults(func=_cmd_build)

    p = sub.add_parser("generate", help="Convert a single SVG file")
    p.add_argument("svg", help="SVG file")
    p.add_argument("out", help="Output folder")
    _add_generation_flags(p)
    p.set_defaults(func=_cmd_generate)

    p = sub.add_parser("lock", help="Protect SVG files from regeneration")
    p.add_argument("files", nargs="+")
    p.set_defaults(func=_cmd_lock)

    p = sub.add_parser("unlock", help="Allow regeneration again")
    p.add_argument("files", nargs="+")
    p.set_defaults(func=_cmd_unlock)

    p = sub.add_parser("config", help="Create, change or show the project config")
    p.add_argument("--init", action="store_true", help="Create the config file with defaults")
    p.add_argument("--set", metavar="KEY=VALUE", help="Set one config value")
    p.add_argument("--show", action="store_true", help="Print the merged config")
    p.set_defaults(func=_cmd_config)

    p = sub.add_parser("clean", help="Delete generated files from an output folder")
    p.add_argument("out")
    p.set_defaults(func=_cmd_clean)

    p = sub.add_parser("serve", help="Run the HTTP API")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--reload", action="store_true", help="Restart on code changes")
    p.set_defaults(func=_cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        return args.func(args)
    except SvgerError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
