"""CLI entry point for quiz-kit.

Usage:
  python -m quiz_kit serve [--port PORT] [--host HOST]
  python -m quiz_kit csv [--file PATH] [--published]
  python -m quiz_kit answers [--file PATH]
  python -m quiz_kit stats [--file PATH]
"""
from __future__ import annotations

import json
import sys
from pathlib import Path


def main():
    args = sys.argv[1:]
    command = args[0] if args else "serve"

    if command == "serve":
        _serve(args[1:])
    elif command == "csv":
        _csv(args[1:])
    elif command == "answers":
        _answers(args[1:])
    elif command == "stats":
        _stats(args[1:])
    else:
        print(f"Unknown command: {command}")
        print("Commands: serve, csv, answers, stats")
        sys.exit(1)


def _parse_flag(args: list[str], name: str, default: str) -> str:
    for i, a in enumerate(args):
        if a == name and i + 1 < len(args):
            return args[i + 1]
    return default


def _read_questions(args: list[str]):
    from quiz_kit.config import load_settings
    from quiz_kit.parsers.question_parser import parse_questions_file

    settings = load_settings()
    path = Path(_parse_flag(args, "--file", str(settings.questions_full_path)))
    if not path.exists():
        print(f"Questions file not found: {path}")
        sys.exit(1)
    try:
        return parse_questions_file(path)
    except json.JSONDecodeError as e:
        print(f"Could not parse {path.name}: {e}")
        sys.exit(1)


def _serve(args: list[str]):
    import uvicorn

    from quiz_kit.config import load_settings

    settings = load_settings()
    port = int(_parse_flag(args, "--port", str(settings.port)))
    host = _parse_flag(args, "--host", settings.host)

    print(f"Starting Quiz Kit on http://{host}:{port}")
    print("Press Ctrl+C to stop\n")
    uvicorn.run(
        "quiz_kit.app:app",
        host=host,
        port=port,
        reload=False,
        timeout_graceful_shutdown=5,
    )


def _csv(args: list[str]):
    from quiz_kit.question_set import filter_published, to_csv

    questions = _read_questions(args)
    if "--published" in args:
        questions = filter_published(questions)
    print(to_csv(questions))


def _answers(args: list[str]):
    from quiz_kit.question_set import to_answers

    questions = _read_questions(args)
    print(json.dumps([a.to_dict() for a in to_answers(questions)], indent=2))


def _stats(args: list[str]):
    from quiz_kit.question_set import (
        all_same_type,
        filter_non_empty,
        filter_published,
        names_of,
        total_points,
        total_published_points,
    )

    questions = _read_questions(args)

    print("Quiz Kit Stats")
    print("=" * 40)
    print(f"Questions:          {len(questions)}")
    print(f"Published:          {len(filter_published(questions))}")
    print(f"Non-empty:          {len(filter_non_empty(questions))}")
    print(f"Total points:       {total_points(questions)}")
    print(f"Published points:   {total_published_points(questions)}")
    print(f"All same type:      {'yes' if all_same_type(questions) else 'no'}")
    print(f"Names:              {', '.join(names_of(questions))}")


if __name__ == "__main__":
    main()
