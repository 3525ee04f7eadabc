from __future__ import annotations
import argparse, json, os, sys
from . import config as CFG
from .engine import Engine

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _print_rows(rows, as_json: bool) -> None:
    if as_json:
        print(json.dumps(rows, ensure_ascii=False, indent=2)); return
    if not rows:
        print(_c("(no matches)", "2;37")); return
    for i, sentence in enumerate(rows, 1):
        print(f"{i:<3} {sentence}")

def _print_concordance(conc, as_json: bool) -> None:
    if as_json:
        print(json.dumps(conc, ensure_ascii=False, indent=2)); return
    width = max((len(w) for w in conc), default=0)
    for word in sorted(conc):
        print(f"{word:<{width}}  {', '.join(str(i) for i in conc[word])}")

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="concordance", description="Word concordance builder and sentence search")
    p.add_argument("words", nargs="*", help="Query words, searched in order")
    p.add_argument("--root", dest="roots", action="append", default=[], metavar="DIR",
                   help="Folder to scan for .txt; repeat for several (default: bundled declaration)")
    p.add_argument("--unit", choices=list(CFG.TEXT_UNITS), default=None, help="Text unit for --root files")
    p.add_argument("--index", action="store_true", help="Print the concordance")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--repl", action="store_true", help="Interactive loop after loading")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.unit and not args.roots:
        p.error("--unit requires --root")
    missing = [r for r in args.roots if not os.path.isdir(r)]
    if missing:
        p.error(f"--root is not a directory: {', '.join(missing)}")
    # one JSON document per run
    if args.json and args.index and (args.words or args.repl):
        p.error("--index --json cannot be combined with query words or --repl")

    eng = Engine(verbose=args.verbose)
    if args.roots:
        eng.load_roots(args.roots, unit=args.unit)
    else:
        eng.load()

    if args.index:
        _print_concordance(eng.concordance, args.json)

    if args.words:
        _print_rows(eng.search(args.words), args.json)

    if args.repl:
        print("Type words separated by spaces (empty line to exit).")
        while True:
            try:
                line = input("> ").strip()
            except (EOFError, KeyboardInterrupt):
                print(); break
            if not line:
                break
            _print_rows(eng.search(line.split()), args.json)

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
