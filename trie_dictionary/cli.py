# cli.py - command line front end for the trie dictionary

import argparse
import logging
import shlex
import sys
import time

from trie_dictionary.core.protocols import WordStore
from trie_dictionary.core.trie import Trie
from trie_dictionary.utils.config_manager import Config
from trie_dictionary.utils.logger_utils import setup_logging, time_block

logger = logging.getLogger(__name__)

BANNER = "Trie Dictionary (type /help for cmds)"
HELP = (
    "cmds: /insert <w..>, /delete <w..>, /search <w>, /suggest <prefix>\n"
    "      /spell <w>, /words, /tree, /stats, /config [key val], /quit\n"
    "      any other line inserts its words\n"
)
# commands that need at least one argument
USAGE = {
    "insert": "/insert <word> [word ...]",
    "delete": "/delete <word> [word ...]",
    "search": "/search <word>",
    "spell": "/spell <word>",
}


def load_words(store: WordStore, path: str) -> int:
    """Insert one word per line from `path`; blank lines are skipped."""
    with open(path, "r", encoding="utf8") as f:
        words = [ln.strip() for ln in f if ln.strip()]
    with time_block(f"load {path}"):
        added = store.insert_many(words)
    logger.info("loaded %d new words from %s (%d lines)", added, path, len(words))
    return added


class CLI:
    def __init__(self, store=None, cfg=None, stdin=None, stdout=None):
        self.store = store if store is not None else Trie()
        self.cfg = cfg if cfg is not None else Config()
        self.stdin = stdin or sys.stdin
        self.out = stdout or sys.stdout
        self.running = True

    def say(self, msg=""):
        self.out.write(f"{msg}\n")

    def start(self):
        self.say(BANNER)
        while self.running:
            self.out.write(">> ")
            self.out.flush()
            try:
                line = self.stdin.readline()
            except KeyboardInterrupt:
                self.say("\nbye.")
                break
            if not line:
                self.say("\nbye.")
                break
            line = line.strip()
            if not line:
                continue
            if line.startswith("/"):
                self.cmd(line)
            else:
                self.run("insert", line.split())

    def cmd(self, line):
        try:
            p = shlex.split(line)
        except ValueError as e:
            self.say(f"error: {e}")
            return True
        if not p:
            return True
        return self.run(p[0].lstrip("/").lower(), p[1:])

    def run(self, c, args):
        """Execute one command; returns False if the command is unknown."""
        try:
            return self._dispatch(c, args)
        except ValueError as e:
            # InvalidWordError and out-of-range settings
            self.say(f"error: {e}")
            return True

    def _dispatch(self, c, args):
        if c in USAGE and not args:
            self.say(f"usage: {USAGE[c]}")
            return True

        if c in ("q", "quit", "exit"):
            self.running = False
            self.say("bye.")
            return True

        elif c == "help":
            self.out.write(HELP)
            return True

        elif c == "insert":
            for w in args:
                state = "added" if self.store.insert(w) else "exists"
                self.say(f"{w}\t{state}")
            return True

        elif c == "delete":
            for w in args:
                state = "deleted" if self.store.delete(w) else "not found"
                self.say(f"{w}\t{state}")
            return True

        elif c == "search":
            w = args[0]
            self.say(f"{w}\t{'found' if self.store.search(w) else 'not found'}")
            return True

        elif c == "suggest":
            prefix = args[0] if args else ""
            t0 = time.perf_counter()
            out = self.store.auto_suggest(prefix)
            logger.debug("suggest %r: %d hits in %.2f ms", prefix, len(out), (time.perf_counter() - t0) * 1000)
            self._print_words(out)
            return True

        elif c == "spell":
            t0 = time.perf_counter()
            out = self.store.get_spelling_suggestions(args[0], self.cfg.get("max_edit_distance"))
            logger.debug("spell %r: %d hits in %.2f ms", args[0], len(out), (time.perf_counter() - t0) * 1000)
            self._print_words(out)
            return True

        elif c == "words":
            self._print_words(self.store.get_all_words(), limit=False)
            return True

        elif c == "tree":
            self.store.print_structure(self.out, mark_terminal=self.cfg.get("show_terminal_marker"))
            return True

        elif c == "stats":
            for k, v in self.store.stats().items():
                self.say(f"{k:10} {v}")
            return True

        elif c == "config":
            if not args:
                self.cfg.show(self.out)
            elif len(args) == 2:
                try:
                    self.cfg.set(args[0], args[1])
                    self.say(f"{args[0]} = {self.cfg.get(args[0])}")
                except KeyError:
                    self.say("No such option")
                except ValueError as e:
                    self.say(f"bad val: {e}")
            else:
                self.say("usage: /config [key val]")
            return True

        self.say("unknown cmd")
        return False

    def _print_words(self, words, limit=True):
        n = self.cfg.get("max_suggestions") if limit else 0
        shown = words[:n] if n > 0 else words
        for w in shown:
            self.say(w)
        if len(shown) < len(words):
            self.say(f"... ({len(words) - len(shown)} more)")
        if not words:
            self.say("(none)")


def build_parser():
    parser = argparse.ArgumentParser(prog="trie-dict", description="Prefix-tree word dictionary")
    parser.add_argument("--words", metavar="FILE", help="word list to load, one word per line")
    parser.add_argument("--config", metavar="PATH", help="JSON config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("command", nargs="?", help="run one command and exit (e.g. suggest, spell, tree)")
    parser.add_argument("args", nargs="*", help="command arguments")
    return parser


def main(argv=None, stdin=None, stdout=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    cli = CLI(cfg=Config(args.config), stdin=stdin, stdout=stdout)
    if args.words:
        try:
            load_words(cli.store, args.words)
        except OSError as e:
            cli.say(f"error: cannot read {args.words}: {e.strerror}")
            return 1

    if args.command:
        return 0 if cli.run(args.command.lstrip("/").lower(), args.args) else 1

    cli.start()
    return 0


if __name__ == "__main__":
    sys.exit(main())
