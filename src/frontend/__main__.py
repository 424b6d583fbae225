from __future__ import annotations
import argparse, asyncio, json
from typing import List

from wordsuggest import SuggestionResult
from frontend import add_suggester_args, build_suggester


def _print_rows(rows: List[SuggestionResult], as_json: bool) -> None:
    if as_json:
        print(json.dumps([r.to_dict() for r in rows], ensure_ascii=False, indent=2))
        return
    if not rows:
        print("(no suggestions)"); return
    print("#  Score   Kind        Word")
    for i, r in enumerate(rows, 1):
        print(f"{i:<2} {r.score:<7.3f} {r.kind.value:<11} {r.word}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Word suggestion CLI (Suggester-backed)")
    add_suggester_args(p)
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--next", default=None, help="Single next-word context to run once")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")

    args = p.parse_args(argv)
    suggester, _ = build_suggester(p, args)

    if args.q is not None:
        _print_rows(asyncio.run(suggester.suggest(args.q)), args.json)

    if args.next is not None:
        _print_rows(asyncio.run(suggester.predict_next(args.next)), args.json)

    if args.repl:
        print("Type a word (empty line to exit, '>' prefix for next-word prediction).")
        while True:
            try:
                q = input("> ").strip()
            except (EOFError, KeyboardInterrupt):
                break
            if not q:
                break
            if q.startswith(">"):
                rows = asyncio.run(suggester.predict_next(q[1:].strip()))
            else:
                rows = asyncio.run(suggester.suggest(q))
            _print_rows(rows, args.json)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
