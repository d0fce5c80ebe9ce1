# ruff: noqa: T201

import argparse
import sys
from pathlib import Path

from pyresults import Err, Ok

from shimekiri.core.controller import AppContext
from shimekiri.core.sort import SortMode
from shimekiri.io.std_io import print_progress, print_task
from shimekiri.storage import get_persistence
from shimekiri.util.dirs import load_env
from shimekiri.util.logger import setup_logger, setup_mode
from shimekiri.util.time import parse_date

logger = setup_logger("shimekiri", is_stream=False, is_file=True)


def get_context(args: argparse.Namespace, *, sort_mode: SortMode = SortMode.CREATED_DATE) -> AppContext:
    env = load_env()
    data_path = args.data or env["DATA_PATH"]
    return AppContext.create(data_path, sort_mode=sort_mode)


def cmd_tui(args: argparse.Namespace) -> int:
    from shimekiri.interfaces.tui.endpoint import run  # noqa: PLC0415

    return run(get_context(args))


def cmd_list(args: argparse.Namespace) -> int:
    ctx = get_context(args, sort_mode=SortMode(args.sort))
    on = ctx.clock()
    for t in ctx.store.tasks:
        print_task(t, on)
    print_progress(*ctx.store.progress())
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    match parse_date(args.target):
        case Ok(target_date):
            pass
        case Err(e):
            print(f"Error: {e}")
            return 1
        case _:
            print("Error: Unexpected error")
            return 1

    ctx = get_context(args)
    tid = ctx.store.add(args.title, args.description or "", target_date)
    ctx.save()
    print(tid)
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    _path = Path(args.path)
    if _path.exists():
        print(f"Error: File already exists: {_path}")
        return 1
    try:
        target = get_persistence(args.path)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    ctx = get_context(args)
    target.save(list(ctx.store.tasks))
    if not _path.exists():
        print(f"Error: Failed to export to {_path}")
        return 1
    print(f"Exported {len(ctx.store)} task(s) to {_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="shimekiri", description="Terminal task tracker with target dates")
    p.add_argument("--data", help="path to the task file (.json or .yaml)")
    p.add_argument("--debug", action="store_true", help="enable debug logging")
    p.set_defaults(func=cmd_tui)
    sub = p.add_subparsers(dest="cmd")

    # tui
    sp = sub.add_parser("tui", help="run TUI (default)")
    sp.set_defaults(func=cmd_tui)

    # list
    sp = sub.add_parser("list", help="print tasks")
    sp.add_argument("--sort", choices=[m.value for m in SortMode], default=SortMode.CREATED_DATE.value)
    sp.set_defaults(func=cmd_list)

    # add
    sp = sub.add_parser("add", help="add a task")
    sp.add_argument("title")
    sp.add_argument("--target", required=True, help="target date (YYYY-MM-DD)")
    sp.add_argument("--description")
    sp.set_defaults(func=cmd_add)

    # export
    sp = sub.add_parser("export", help="export tasks to a new .json/.yaml file")
    sp.add_argument("path")
    sp.set_defaults(func=cmd_export)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    env = load_env()
    setup_mode(is_debug=args.debug or env["LOG_LEVEL"] == "DEBUG")
    try:
        return args.func(args)  # type: ignore[no-any-return]
    except ValueError as e:
        # 設定ミス (未対応の拡張子など)
        logger.exception("Failed to start")
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
