# apps/cli/run_multi.py
"""
Run several solvers over the same dictionary in one shot.

Default is the full comparison (random, frequency, optimal). The dictionary
is validated, loaded and its frequency table computed once; every solver
then reuses that shared context.

Writes per-solver outputs to: <outdir>/<solver_id>.txt, _<run_id>.csv, _manifest.json
"""

from __future__ import annotations
import argparse, sys, time
from pathlib import Path

from apps.cli.run import (add_common_args, load_dictionary, resolve_order, run_solver,
                          setup_logging)
from hangman_ai.solvers import DEFAULT_SOLVERS, build_context, get_solver_ids


def main(argv=None) -> int:
    registered = get_solver_ids()
    ap = argparse.ArgumentParser(description="hangmanAI — run many solvers at once")
    ap.add_argument("--solvers", nargs="+", default=list(DEFAULT_SOLVERS),
                    help=f"list of solver ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--exclude", nargs="*", default=[],
                    help="solver ids to skip (only if --solvers ALL)")
    add_common_args(ap)
    args = ap.parse_args(argv)
    setup_logging(args.log_level)

    # 1) expand solvers
    if len(args.solvers) == 1 and args.solvers[0].lower() == "all":
        todo = [s for s in DEFAULT_SOLVERS if s not in set(args.exclude)]
    else:
        todo = args.solvers
        missing = [s for s in todo if s not in registered]
        if missing:
            ap.error(f"Unknown solver ids: {missing}. Registered: {registered}")

    try:
        # 2) validate + load once
        dictionary, rep = load_dictionary(args)
        dictionary.require_nonempty()
        context = build_context(dictionary, resolve_order(args.frequency_order))

        outdir = Path(args.outdir)
        # 3) run each solver sequentially (shared dictionary and context)
        for sid in todo:
            if args.progress != "off":
                print(f"\n=== Strategy '{sid}' on {len(dictionary)} words ===")
            t0 = time.time()
            paths = run_solver(sid, dictionary, context, args, outdir=outdir,
                               wordlist_report=rep)
            for p in paths.values():
                print(f"Wrote: {p}")
            print(f"Completed in {time.time() - t0:.3f}s.")
    except (ValueError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
