"""Command-line interface."""

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Mapping, Optional, Tuple

from graphpoet.affinity import CorpusError
from graphpoet.config import PoetConfig, find_config
from graphpoet.logs import fatal, setup_logging
from graphpoet.poet import GraphPoet
from graphpoet.representations import representations
from graphpoet.watch import Watcher


def main(argv=None):
    parser, commands = get_parser()
    args = parser.parse_args(argv)
    if args.command == "help":
        if args.help_target:
            commands[args.help_target].print_help()
        else:
            parser.print_help()
        return

    # Errors while watching are reported without exiting.
    keep_going = args.keep_going or args.command == "watch"
    setup_logging(sys.stderr, args.verbose or 0, keep_going)

    resolve_options(args)
    command = globals()[f"command_{args.command}"]
    assert command, "unexpected command name"
    command(args)


def get_parser() -> Tuple[ArgumentParser, Mapping[str, ArgumentParser]]:
    parser = ArgumentParser(
        prog="graphpoet", description="insert bridge words using a word affinity graph"
    )
    commands = parser.add_subparsers(metavar="command", dest="command", required=True)

    parser_help = commands.add_parser("help", help="show this help message and exit")
    parser_help.add_argument(
        metavar="command",
        dest="help_target",
        nargs="?",
        help="get help for a specific command",
    )

    parser_poem = commands.add_parser("poem", help="generate a poem")
    parser_poem.add_argument(
        "words", nargs="*", help="input words (default: one poem per stdin line)",
    )

    parser_dump = commands.add_parser("dump", help="print the affinity graph")

    parser_watch = commands.add_parser(
        "watch", help="regenerate a poem whenever the corpus changes"
    )
    parser_watch.add_argument("words", nargs="+", help="input words")

    for subparser in [parser_poem, parser_dump, parser_watch]:
        subparser.add_argument(
            "-c", "--corpus", type=Path, help="corpus file (default: from config)"
        )
        subparser.add_argument(
            "-g",
            "--graph",
            choices=representations.keys(),
            help="graph representation (default: from config, or edges)",
        )
        subparser.add_argument(
            "-k",
            "--keep-going",
            action="store_true",
            help="keep going if there are errors",
        )
        subparser.add_argument(
            "-v",
            "--verbose",
            action="count",
            help="increase logging (can use multiple times)",
        )

    return parser, commands.choices


def resolve_options(args: Namespace):
    """Fill in corpus and graph options from graphpoet.yml where not given."""
    cfg: Optional[PoetConfig] = None
    path = find_config()
    if path is not None:
        logging.info("found config %s", path)
        cfg = PoetConfig.load(path)
        cfg.validate()
        logging.debug("config: %r", cfg)
    if args.corpus is None:
        args.corpus = cfg.corpus_path() if cfg else None
        if args.corpus is None:
            fatal("no corpus given (use --corpus or set it in graphpoet.yml)")
    if args.graph is None:
        args.graph = cfg["representation"] if cfg else "edges"


def load_poet(args: Namespace) -> GraphPoet:
    try:
        return GraphPoet.from_file(args.corpus, args.graph)
    except CorpusError as ex:
        fatal("%s", ex)


def command_poem(args: Namespace):
    poet = load_poet(args)
    if args.words:
        print(poet.poem(" ".join(args.words)))
        return
    for line in sys.stdin:
        print(poet.poem(line))


def command_dump(args: Namespace):
    poet = load_poet(args)
    poet.graph.dump(sys.stdout)


def command_watch(args: Namespace):
    text = " ".join(args.words)
    watcher = Watcher(args.corpus, args.graph, lambda poet: print(poet.poem(text)))
    watcher.run()
