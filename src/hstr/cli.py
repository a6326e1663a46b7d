import argparse
import curses
import os
import sys

from hstr import __version__
from hstr.app import run_picker
from hstr.config import load_config
from hstr.debug_log import DebugLogger
from hstr.history import SourceUnavailable, default_history_path, load_history, most_recent_first
from hstr.terminal import InjectionUnavailable, fill_terminal_input

EXIT_OK = 0
EXIT_NO_HISTORY = 1


def _build_parser():
    p = argparse.ArgumentParser(prog="hstr", description="Shell history suggest box")
    p.add_argument("-v", "--version", action="version",
                   version=f"%(prog)s {__version__}")
    p.add_argument("-c", "--config", default=None,
                   help="Configuration name or path (searches ~/.hstr/, ./, or use full path)")
    p.add_argument("-f", "--history-file", default=None,
                   help="History file to read (default: $HISTFILE or ~/.bash_history)")
    p.add_argument("--no-color", action="store_true", default=False,
                   help="Disable colors")
    p.add_argument("-d", "--debug", action="store_true", default=False,
                   help="Enable debug logging to hstr_*.log files in current directory")
    p.add_argument("-p", "--print", dest="print_only", action="store_true", default=False,
                   help="Print the selected command to stdout instead of injecting it")
    p.add_argument("--no-skip-timestamps", action="store_true", default=False,
                   help="Keep bash/zsh timestamp lines as history entries")
    return p


def main(argv=None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        p.error(str(e))

    # CLI arguments override config values
    if args.history_file is not None:
        config.history.path = args.history_file
    if args.no_color:
        config.ui.color = False
    if args.no_skip_timestamps:
        config.history.skip_timestamps = False
    if args.print_only:
        config.output = "print"

    path = config.history.path or default_history_path()
    try:
        lines = load_history(path, skip_timestamps=config.history.skip_timestamps)
    except SourceUnavailable as e:
        print(f"\n{e}", file=sys.stderr)
        return EXIT_NO_HISTORY
    history = most_recent_first(lines)

    # Escape aborts, so keep the escape-sequence wait short
    os.environ.setdefault("ESCDELAY", "25")

    logger = DebugLogger()
    if args.debug:
        logger.start()
    try:
        command = curses.wrapper(run_picker, history, config, logger)
    finally:
        logger.stop()

    if config.output == "print":
        if command:
            print(command)
        return EXIT_OK

    try:
        fill_terminal_input(command)
    except InjectionUnavailable as e:
        print(f"Cannot push command into the terminal: {e}", file=sys.stderr)
        print(command)
    return EXIT_OK
