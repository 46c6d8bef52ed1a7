from __future__ import annotations
import os, sys, datetime, logging
from persona_core.shuffle import make_question_order, new_seed, questions_from_order
from persona_core.scoring import compute_result
from persona_core.profiles import display_rows
from persona_core.report_html import export_report_html
def ask(prompt: str) -> int:
    print(prompt)
    while True:
        v = input("Your answer (1-5): ").strip()
        if v.isdigit() and 1 <= int(v) <= 5: return int(v)
        print("Enter a number from 1 to 5.")
def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    args = sys.argv[1:] if argv is None else argv
    seed = args[0] if args else new_seed()
    print("Personality Test")
    logging.info("Question order seed: %s", seed)
    order = make_question_order(seed)
    questions = questions_from_order(order)
    answers = []
    for n, q in enumerate(questions, start=1):
        answers.append(ask(f"[{n}/{len(questions)}] {q.text}  [1=strongly disagree, 5=strongly agree]"))
    res = compute_result(answers, order)
    print(f"\nYour type: {res.type_code}  (profile clarity {res.stability:.1f})")
    for row in display_rows(res.scores):
        print(f"  {row['label']:<20} {row['percent']:3d}  {row['level']}")
    os.makedirs("reports", exist_ok=True)
    ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    path = export_report_html(res, os.path.join("reports", f"report_{ts}.html"))
    print(f"Done. Report saved to: {path}")
    return 0
if __name__ == "__main__": raise SystemExit(main())
