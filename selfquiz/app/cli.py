from __future__ import annotations

"""Console front-end for selfquiz.

Renders `SessionEngine.view()` and turns keypresses into engine intents.
It keeps no quiz state of its own.
"""

import argparse
from typing import Any, Callable, Dict

from ..bank.loader import QuestionBank, list_banks, load_bank
from ..config.config import load_config, validate_config
from ..stats.stats import format_answers, format_history, format_question, format_summary
from ..util.randomness import make_rng, seed_if_needed
from .explain import attach as explain_attach, enable as explain_enable, trace as xtrace
from .session_engine import InvalidTransition, Mode, SessionEngine


def _build_ui() -> dict[str, Callable[..., Any]]:
    def ask(prompt: str) -> str:
        try:
            return input(prompt)
        except EOFError:
            return "q"

    def inform(msg: str) -> None:
        print(msg)

    return {"ask": ask, "inform": inform}


def run_quiz(engine: SessionEngine, bank: QuestionBank, ui: Dict[str, Callable[..., Any]], *, number_answers: bool = True) -> None:
    """Drive the engine from user input until the user quits.

    Keys: main screen `s` start, `q` quit; quiz screen `a` show answer,
    `c`/`w` self-grade, `f` finalize, `q` finalize and quit; results screen
    Enter returns to main, `q` quits.
    """
    ask = ui["ask"]
    inform = ui["inform"]

    while True:
        view = engine.view()

        if view.mode is Mode.IDLE:
            inform(f"\n== {bank.name} ({len(bank)} questions) ==")
            inform(format_history(view.history))
            ans = ask("[s] start quiz, [q] quit: ").strip().lower()
            if ans == "s":
                engine.start_session(bank.questions)
            elif ans == "q":
                return
            else:
                inform("Press 's' to start or 'q' to quit.")
            continue

        if view.mode is Mode.FINISHED:
            inform("\nResults")
            assert view.latest_attempt is not None
            inform(format_summary(view.latest_attempt))
            ans = ask("Press Enter to return to main, [q] to quit: ").strip().lower()
            engine.return_to_start()
            if ans == "q":
                return
            continue

        q = view.current_question
        if q is None:
            inform("No questions to display.")
            prompt = "[f] finalize: "
        else:
            inform("\n" + format_question(q, view.position, view.total))
            if view.revealed:
                inform(format_answers(q, numbered=number_answers))
                prompt = "[c] correct, [w] wrong, [f] finalize: "
            else:
                prompt = "[a] show answer, [f] finalize: "

        ans = ask(prompt).strip().lower()
        actions: Dict[str, Callable[[], Any]] = {
            "a": engine.reveal,
            "c": engine.mark_correct,
            "w": engine.mark_wrong,
            "f": engine.finalize,
        }
        if ans == "q":
            engine.finalize()
            engine.return_to_start()
            return
        action = actions.get(ans)
        if action is None:
            inform(f"Unknown choice '{ans}'. {prompt.rstrip(': ')}")
            continue
        try:
            action()
        except InvalidTransition as exc:
            inform(f"Not now: {exc.reason or exc}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="selfquiz")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list-banks")

    sp = sub.add_parser("show-bank")
    sp.add_argument("--bank", default="civics")

    rp = sub.add_parser("run")
    rp.add_argument("--config", default=None)
    rp.add_argument("--bank", default=None, help="Bundled bank name or path to a YAML bank")
    rp.add_argument("--seed", type=int, default=None)
    rp.add_argument("--explain", action="store_true")

    args = p.parse_args(argv)

    if args.cmd == "list-banks":
        for b in list_banks():
            print(f"{b['id']}: {b['name']} | questions: {b['questions']}")
        return 0

    if args.cmd == "show-bank":
        bank = load_bank(args.bank)
        print(f"{bank.name}: {len(bank)} questions")
        for i, q in enumerate(bank, start=1):
            print(f"{i}. [{q.label}] {q.prompt}")
            for a in q.accepted_answers:
                print(f"     - {a}")
        return 0

    if args.cmd == "run":
        seed_if_needed()
        cfg = validate_config(load_config(args.config))
        if args.explain or cfg["explain"]["enabled"]:
            explain_enable(True)

        bank = load_bank(args.bank or cfg["bank"]["name"])
        seed = args.seed if args.seed is not None else cfg["session"]["seed"]
        engine = SessionEngine(rng=make_rng(seed))
        explain_attach(engine.bus)
        xtrace("bank_loaded", {"bank": bank.name, "questions": len(bank), "seed": seed})

        run_quiz(engine, bank, _build_ui(), number_answers=bool(cfg["ui"]["number_answers"]))

        if cfg["ui"]["show_history_on_exit"]:
            print("\nSession History:")
            print(format_history(engine.history()))
        return 0

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
