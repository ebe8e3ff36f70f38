#!/usr/bin/env python3
"""Faz uma pergunta sim/não a um serviço Decision Maker em execução.

Uso:
    python scripts/ask_question.py "Should I eat pizza tonight?"
    python scripts/ask_question.py --base-url http://localhost:8080 "Vou à praia?"

Saída 0 com veredito; saída 1 quando não há resposta disponível.
"""

from __future__ import annotations

import argparse
import asyncio

from api.connectors.decide import (
    DecisionClient,
    DecisionClientConfig,
    DecisionView,
    ViewPhase,
)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("question", help="Pergunta de sim/não")
    parser.add_argument("--base-url", default="http://localhost:8080")
    parser.add_argument("--timeout", type=float, default=10.0)
    return parser.parse_args()


async def _run(question: str, config: DecisionClientConfig) -> DecisionView:
    view = DecisionView().with_question(question).start()
    if view.phase is not ViewPhase.PENDING:
        return view
    answer = await DecisionClient(config).ask(question)
    return view.settle(answer)


def main() -> int:
    args = _parse_args()
    config = DecisionClientConfig(base_url=args.base_url, timeout_seconds=args.timeout)
    view = asyncio.run(_run(args.question, config))
    if view.answer is None:
        print("Sem resposta disponível")
        return 1
    print(view.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
